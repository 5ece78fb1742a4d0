# src/todo_list/connectors/__init__.py
