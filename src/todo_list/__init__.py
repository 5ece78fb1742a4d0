# src/todo_list/__init__.py
