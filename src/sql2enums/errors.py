# ===== SECTION: ERROR CLASSES =====
# Custom exception classes for sql2enums

class SQL2EnumsError(Exception):
    """Base class for all sql2enums errors."""
    pass


class SQLReadError(SQL2EnumsError):
    """Fatal failure while reading the SQL input stream."""
    def __init__(self, operation: str, cause: Exception = None, file_name: str = None):
        self.operation = operation
        self.cause = cause
        self.file_name = file_name

        details = ""
        if file_name:
            details += f" on file '{file_name}'"
        if cause is not None:
            details += f": {cause}"

        super().__init__(f"{operation} failed{details}")


class CodeGenerationError(SQL2EnumsError):
    """Error while rendering enum declarations to source code."""
    def __init__(self, message: str, type_name: str = None, value: str = None):
        self.type_name = type_name
        self.value = value

        details = ""
        if type_name:
            details += f" for type '{type_name}'"
        if value is not None:
            details += f" with value '{value}'"

        super().__init__(f"{message}{details}")


class ConfigurationError(SQL2EnumsError):
    """Invalid combination of generator options."""
    pass
