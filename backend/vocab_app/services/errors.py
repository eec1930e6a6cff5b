"""Domain errors raised by the service layer.

The HTTP layer maps these onto status codes in ``vocab_app.main``.
"""


class VocabularyError(Exception):
    """Base class for vocabulary/quiz failures."""


class WordNotFoundError(VocabularyError):
    def __init__(self, word_id: str):
        super().__init__(f"Vocabulary {word_id} not found")
        self.word_id = word_id


class WordAccessDeniedError(VocabularyError):
    """The word exists but belongs to another user."""

    def __init__(self, word_id: str):
        super().__init__(f"Access to vocabulary {word_id} denied")
        self.word_id = word_id


class NoCandidatesError(VocabularyError):
    """No word matched the quiz selection."""

    def __init__(self, status_filter: str = ""):
        super().__init__("No vocabularies available for testing")
        self.status_filter = status_filter


class AuthError(Exception):
    """Base class for account failures."""


class UserAlreadyExistsError(AuthError):
    def __init__(self, email: str):
        super().__init__("User already exists")
        self.email = email


class InvalidCredentialsError(AuthError):
    def __init__(self):
        super().__init__("Invalid email or password")


class InactiveUserError(AuthError):
    def __init__(self):
        super().__init__("Account is inactive")
