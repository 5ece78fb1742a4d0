# src/todo_list/tasks/__init__.py
