"""Service layer — wraps the intake parser in the ServiceResult contract."""
