"""HR employee records service (Flask)."""
