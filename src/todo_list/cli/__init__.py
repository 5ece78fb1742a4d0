# src/todo_list/cli/__init__.py
