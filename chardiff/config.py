"""
Comparison options and their defaults.

All per-call configuration travels in one DiffOptions value. Callers may
also pass a plain mapping; recognised names are the dataclass field names
and the camelCase aliases used by JSON clients.
"""
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Tuple, Union

from .exceptions import InvalidConfiguration

PRECISION_CHARACTER = "character"
PRECISION_WORD = "word"
PRECISION_LINE = "line"
PRECISIONS = (PRECISION_CHARACTER, PRECISION_WORD, PRECISION_LINE)

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_CONSECUTIVE_SPACES = 2

OPTION_ALIASES = {
    "timeoutMs": "timeout_ms",
    "timeout": "timeout_ms",
    "ignoreWhitespace": "ignore_whitespace",
    "ignoreCase": "ignore_case",
    "maxConsecutiveSpaces": "max_consecutive_spaces",
    "preserveTabs": "preserve_tabs",
    "removeBom": "remove_bom",
    "normalizeLineBreaks": "normalize_line_breaks",
    "normalizeWhitespace": "normalize_whitespace",
}


@dataclass(frozen=True)
class NormalizeOptions:
    """
    Controls the Text Normalizer.

    Attributes:
        remove_bom (bool): Strip one leading U+FEFF.
        normalize_line_breaks (bool): CRLF and lone CR become LF.
        normalize_whitespace (bool): Apply the tab / space-run rules below.
        preserve_tabs (bool): Keep tabs instead of turning them into spaces.
        max_consecutive_spaces (int): Clamp longer space runs to this length.
            0 disables the clamp.
    """
    remove_bom: bool = True
    normalize_line_breaks: bool = True
    normalize_whitespace: bool = True
    preserve_tabs: bool = False
    max_consecutive_spaces: int = DEFAULT_MAX_CONSECUTIVE_SPACES

    def merged(self, **overrides: Any) -> "NormalizeOptions":
        """Returns a copy with the given normalizer options replaced."""
        names = {f.name for f in fields(self)}
        values: Dict[str, Any] = {}
        for raw_name, value in overrides.items():
            name = OPTION_ALIASES.get(raw_name, raw_name)
            if name not in names:
                raise InvalidConfiguration(
                    f"Unknown normalize option: {raw_name!r}",
                    parameter_name=raw_name, parameter_value=value)
            values[name] = value
        return replace(self, **values)


@dataclass(frozen=True)
class DiffOptions:
    """
    Options for a single comparison.

    Attributes:
        timeout_ms (float): Wall-clock budget for the alignment, in ms.
        ignore_whitespace (bool): Compare whitespace-insensitively.
        ignore_case (bool): Compare case-insensitively.
        precision (str): 'character', 'word' or 'line'.
        normalize (NormalizeOptions): Preprocessing applied to both texts.
    """
    timeout_ms: float = DEFAULT_TIMEOUT_MS
    ignore_whitespace: bool = False
    ignore_case: bool = False
    precision: str = PRECISION_CHARACTER
    normalize: NormalizeOptions = field(default_factory=NormalizeOptions)

    def _problems(self) -> List[Tuple[str, Any, str]]:
        problems = []
        timeout = self.timeout_ms
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            problems.append(("timeout_ms", timeout, f"timeout_ms must be a number, got {timeout!r}"))
        elif not math.isfinite(timeout):
            problems.append(("timeout_ms", timeout, f"timeout_ms must be finite, got {timeout!r}"))
        elif timeout <= 0:
            problems.append(("timeout_ms", timeout, f"timeout_ms must be greater than 0, got {timeout!r}"))

        if self.precision not in PRECISIONS:
            problems.append((
                "precision", self.precision,
                f"precision must be one of {', '.join(PRECISIONS)}, got {self.precision!r}"))

        if not isinstance(self.normalize, NormalizeOptions):
            problems.append((
                "normalize", self.normalize,
                f"normalize must be NormalizeOptions, got {type(self.normalize).__name__}"))
            return problems

        spaces = self.normalize.max_consecutive_spaces
        if isinstance(spaces, bool) or not isinstance(spaces, int) or spaces < 0:
            problems.append((
                "max_consecutive_spaces", spaces,
                f"max_consecutive_spaces must be a non-negative integer, got {spaces!r}"))
        return problems

    def errors(self) -> List[str]:
        """Returns every validation problem as a message, without raising."""
        return [message for _, _, message in self._problems()]

    def validate(self) -> "DiffOptions":
        """
        Raises InvalidConfiguration for the first bad option.

        Returns:
            DiffOptions: self, so calls can be chained.
        """
        problems = self._problems()
        if problems:
            name, value, message = problems[0]
            raise InvalidConfiguration(message, parameter_name=name, parameter_value=value)
        return self

    def merged(self, **overrides: Any) -> "DiffOptions":
        """
        Returns a copy with the given options replaced.

        Normalizer option names are routed into the nested NormalizeOptions.
        """
        top_names = {f.name for f in fields(self)}
        norm_names = {f.name for f in fields(NormalizeOptions)}
        top: Dict[str, Any] = {}
        norm: Dict[str, Any] = {}

        for raw_name, value in overrides.items():
            name = OPTION_ALIASES.get(raw_name, raw_name)
            if name == "normalize" and isinstance(value, Mapping):
                top[name] = NormalizeOptions().merged(**value)
            elif name in top_names:
                top[name] = value
            elif name in norm_names:
                norm[name] = value
            else:
                raise InvalidConfiguration(
                    f"Unknown option: {raw_name!r}",
                    parameter_name=raw_name, parameter_value=value)

        if norm:
            base = top.get("normalize", self.normalize)
            # A non-NormalizeOptions base is left for validate() to report.
            if isinstance(base, NormalizeOptions):
                top["normalize"] = base.merged(**norm)
        return replace(self, **top)


DEFAULT_DIFF_OPTIONS = DiffOptions()

OptionsLike = Union[DiffOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> DiffOptions:
    """Turns None / mapping / DiffOptions into a DiffOptions (unvalidated)."""
    if options is None:
        return DEFAULT_DIFF_OPTIONS
    if isinstance(options, DiffOptions):
        return options
    if isinstance(options, Mapping):
        return DEFAULT_DIFF_OPTIONS.merged(**options)
    raise InvalidConfiguration(
        f"options must be DiffOptions or a mapping, got {type(options).__name__}",
        parameter_name="options", parameter_value=options)
