"""
Input validation and sanitization for chat text and form fields.
"""

from .exceptions import ValidationError


class InputValidator:
    """
    Validates and sanitizes user input.
    
    Keeps text as typed (the router matches on it) apart from trimming and
    dropping NUL bytes.
    """

    MAX_MESSAGE_LENGTH = 500
    MAX_FIELD_LENGTH = 1000

    @staticmethod
    def sanitize_message(message: str) -> str:
        """
        Sanitize a chat message.
        
        :param message: User's message
        :return: Sanitized message
        :raises ValidationError: If message is empty, not a string or too long
        """
        if not message or not isinstance(message, str):
            raise ValidationError("Message must be a non-empty string")

        if len(message) > InputValidator.MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"Message exceeds maximum length of {InputValidator.MAX_MESSAGE_LENGTH} characters"
            )

        sanitized = message.replace("\x00", "").strip()

        if not sanitized:
            raise ValidationError("Message cannot be empty after sanitization")

        return sanitized

    @staticmethod
    def validate_length(text: str, max_length: int, field_name: str = "Input") -> str:
        """
        Validate text length.
        
        :param text: Text to validate
        :param max_length: Maximum allowed length
        :param field_name: Name of the field for error messages
        :return: Validated text
        :raises ValidationError: If text exceeds maximum length
        """
        if not isinstance(text, str):
            raise ValidationError(f"{field_name} must be a string")

        if len(text) > max_length:
            raise ValidationError(
                f"{field_name} exceeds maximum length of {max_length} characters"
            )

        return text
