"""Validation helpers shared by tunnel models and transports."""

# Port range constants
MIN_PORT = 1
MAX_PORT = 65535


def validate_port(port: int, port_name: str = "Port") -> None:
    """Validate port number range.

    Args:
        port: Port number to validate
        port_name: Name of the port for error messages

    Raises:
        ValueError: If port is not in valid range (1-65535)
    """
    if isinstance(port, bool) or not isinstance(port, int) or not (
        MIN_PORT <= port <= MAX_PORT
    ):
        raise ValueError(f"{port_name} must be between {MIN_PORT} and {MAX_PORT}")


def validate_non_empty_string(value: str, field_name: str) -> str:
    """Validate that a string is not empty or only whitespace.

    Args:
        value: String value to validate
        field_name: Name of the field for error messages

    Returns:
        Stripped string value

    Raises:
        ValueError: If string is empty or only whitespace
    """
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value.strip()


def parse_port(value: str, port_name: str = "Port") -> int:
    """Parse a port identifier such as ``"3000"`` into a port number.

    Args:
        value: Port identifier as stored on a tunnel
        port_name: Name of the port for error messages

    Returns:
        Port number

    Raises:
        ValueError: If value is not numeric or out of range
    """
    text = validate_non_empty_string(value, port_name)
    if not text.isdigit():
        raise ValueError(f"{port_name} must be numeric, got '{value}'")
    port = int(text)
    validate_port(port, port_name)
    return port
