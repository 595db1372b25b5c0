"""
Service layer.

``habit_store`` holds the business rules and the in-memory data; API
handlers only translate between HTTP and store calls.
"""
