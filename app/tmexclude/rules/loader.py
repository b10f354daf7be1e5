"""Rule file parsing and first-run bootstrap.

The rule file holds one ``<directory name> <sentinel file name>`` pair per
line. Blank lines and lines whose first non-space character is ``#`` are
ignored. Any other line that does not split into exactly two tokens is
returned as a :class:`RuleLineError` and skipped, so the caller can warn
about it.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from tmexclude.core.paths import ensure_config_dir, get_rules_path
from tmexclude.rules.defaults import DEFAULT_RULES_TEXT
from tmexclude.rules.models import ClassificationRule, ParsedRules, RuleLineError, RuleSet

logger = logging.getLogger(__name__)


def parse_rule_line(line: str, lineno: int) -> ClassificationRule | RuleLineError | None:
    """Parse a single rule file line.

    Args:
        line: Raw line text.
        lineno: 1-based line number, used in error results.

    Returns:
        None for blank and comment lines, a ClassificationRule for a
        well-formed line, or a RuleLineError describing the problem.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    tokens = stripped.split()
    if len(tokens) < 2:
        return RuleLineError(lineno, line, "missing sentinel file name")
    if len(tokens) > 2:
        return RuleLineError(lineno, line, f"expected 2 fields, found {len(tokens)}")

    try:
        return ClassificationRule(directory_name=tokens[0], sentinel_name=tokens[1])
    except ValueError as e:
        return RuleLineError(lineno, line, str(e))


def parse_rules(text: str) -> ParsedRules:
    """Parse rule file content into rules and per-line errors."""
    rules: list[ClassificationRule] = []
    errors: list[RuleLineError] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        parsed = parse_rule_line(line, lineno)
        if parsed is None:
            continue
        if isinstance(parsed, RuleLineError):
            logger.debug("Skipping malformed rule %s", parsed)
            errors.append(parsed)
            continue
        logger.debug("Loaded rule %d: %s", lineno, parsed)
        rules.append(parsed)

    return ParsedRules(rules=tuple(rules), errors=tuple(errors))


def bootstrap_rules_file(path: Path) -> bool:
    """Write the default rule file if none exists yet.

    Args:
        path: Rule file location.

    Returns:
        True if the file was created, False if it already existed.

    Raises:
        RuntimeError: If the file cannot be written.
    """
    if path.exists():
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_RULES_TEXT, encoding="utf-8")
    except OSError as e:
        msg = f"Cannot create rule file {path}: {e}"
        raise RuntimeError(msg) from e

    logger.info("Created default rule file at %s", path)
    return True


def load_rules_file(path: Path | None = None) -> ParsedRules:
    """Load the rule file, bootstrapping it with defaults on first run.

    Args:
        path: Rule file location. Defaults to the file in the config
            directory, which is created if needed.

    Returns:
        ParsedRules with the valid rules and any malformed lines.

    Raises:
        RuntimeError: If the config directory or rule file cannot be
            created or read.
    """
    if path is None:
        ensure_config_dir()
        path = get_rules_path()

    bootstrap_rules_file(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read rule file {path}: {e}"
        raise RuntimeError(msg) from e

    return parse_rules(text)


def load_rule_set(
    skip_paths: Iterable[str | Path],
    path: Path | None = None,
) -> tuple[RuleSet, tuple[RuleLineError, ...]]:
    """Load the rule file and combine it with skip paths into a RuleSet.

    Args:
        skip_paths: Paths that are never traversed.
        path: Rule file location, see :func:`load_rules_file`.

    Returns:
        Tuple of the rule set and the malformed lines that were skipped.

    Raises:
        RuntimeError: If the rule file cannot be created or read.
    """
    parsed = load_rules_file(path)
    return RuleSet.build(parsed.rules, skip_paths), parsed.errors
