# src/todo_list/core/__init__.py
