"""Comment skipping mixin."""

from frontlet.errors import UnterminatedCommentError
from frontlet.location import SourceLocation
from frontlet.utils.logger import get_logger

logger = get_logger(__name__)


class CommentScannerMixin:
    """Mixin skipping ``//`` line comments and ``/* */`` block comments.

    Block comments do not nest: the first ``*/`` closes the comment. A block
    comment that never closes consumes the rest of the input. That is not
    an error unless strict comment checking is enabled.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _strict_comments: bool

    def _save_location(self) -> None:
        """Save current location as the start of a lexeme."""
        raise NotImplementedError

    def _location(self) -> SourceLocation:
        """Location spanning the saved start to the current position."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Advance position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_comment(self) -> bool:
        """Skip a comment starting at the current position.

        Returns:
            True if a comment was consumed, False if none starts here.

        Raises:
            UnterminatedCommentError: If strict comments are enabled and a
                block comment reaches end of input.
        """
        source = self._source
        pos = self._pos

        if source.startswith("//", pos):
            newline = source.find("\n", pos + 2)
            self._commit_to(self._source_len if newline == -1 else newline + 1)
            return True

        if source.startswith("/*", pos):
            self._save_location()
            close = source.find("*/", pos + 2)
            if close != -1:
                self._commit_to(close + 2)
                return True

            self._commit_to(self._source_len)
            location = self._location()
            if self._strict_comments:
                raise UnterminatedCommentError(location)
            logger.debug("Unterminated block comment at %s consumed to end of input", location)
            return True

        return False
