import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

TextPair = Tuple[Optional[str], Optional[str]]


class InputParser(ABC):
    """Abstract base class for input parsers."""

    @abstractmethod
    def parse(self, source_a: str, source_b: Optional[str] = None) -> TextPair:
        """
        Reads the input source(s) into the two texts to compare.

        Args:
            source_a (str): The first source path.
            source_b (str, optional): The second source path.

        Returns:
            Tuple[Optional[str], Optional[str]]: (text_a, text_b). A side is
            None when its source could not be read.
        """

    @staticmethod
    def _open(filepath: str):
        # newline='' keeps CR / CRLF so the normalizer sees the raw breaks.
        return open(filepath, 'r', encoding='utf-8', errors='replace', newline='')


class RawFileParser(InputParser):
    """Reads two separate text files."""

    def parse(self, source_a: str, source_b: Optional[str] = None) -> TextPair:
        if not source_b:
            raise ValueError("RawFileParser requires two files.")
        return self._read_file(source_a), self._read_file(source_b)

    def _read_file(self, filepath: str) -> Optional[str]:
        try:
            with self._open(filepath) as f:
                return f.read()
        except FileNotFoundError:
            logger.warning("File not found: %s", filepath)
            return None


class CombinedFileParser(InputParser):
    """Reads a single file holding both versions separated by delimiter lines."""
    DELIMITER_OLD = "--- OLD FILE ---"
    DELIMITER_NEW = "--- NEW FILE ---"

    def parse(self, source_a: str, source_b: Optional[str] = None) -> TextPair:
        sections = {"OLD": [], "NEW": []}
        current_section = None
        found_old = False
        found_new = False

        try:
            with self._open(source_a) as f:
                for line in f:
                    stripped = line.strip()
                    if stripped == self.DELIMITER_OLD:
                        current_section = "OLD"
                        found_old = True
                        continue
                    elif stripped == self.DELIMITER_NEW:
                        current_section = "NEW"
                        found_new = True
                        continue

                    if current_section is not None:
                        sections[current_section].append(line)
        except FileNotFoundError:
            logger.warning("File not found: %s", source_a)
            return None, None

        if not found_old or not found_new:
            logger.warning("Missing delimiters in %s. Found OLD: %s, NEW: %s",
                           source_a, found_old, found_new)

        return self._join(sections["OLD"]), self._join(sections["NEW"])

    @staticmethod
    def _join(lines: List[str]) -> str:
        # The line break before the next delimiter belongs to the delimiter.
        text = "".join(lines)
        for ending in ("\r\n", "\n", "\r"):
            if text.endswith(ending):
                return text[:-len(ending)]
        return text


class InputController:
    """
    Selects a parser for the given sources and returns the two texts.
    """

    def parse(self, source_a: str, source_b: Optional[str] = None) -> TextPair:
        """
        Args:
            source_a (str): First file, or a combined file when alone.
            source_b (str, optional): Second file.

        Returns:
            Tuple[Optional[str], Optional[str]]: Texts for old and new.
        """
        parser = self._get_parser(source_a, source_b)
        return parser.parse(source_a, source_b)

    def _get_parser(self, source_a: str, source_b: Optional[str] = None) -> InputParser:
        if source_b:
            return RawFileParser()
        return CombinedFileParser()
