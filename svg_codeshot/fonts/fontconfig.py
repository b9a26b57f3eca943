"""fontconfig helpers: family name and declared language coverage.

These shell out to ``fc-scan`` and degrade to ``None`` when fontconfig is
not installed. Nothing here is needed to render; the CLI uses it to label
fonts and warn about missing Latin coverage.
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# fontconfig language codes of Latin-script orthographies
LATIN_CODES: frozenset[str] = frozenset(
    {
        "aa", "af", "ay", "bi", "br", "bs", "ca", "ch", "co", "cs", "cy", "da", "de",
        "en", "eo", "es", "et", "eu", "fi", "fj", "fo", "fr", "fur", "fy", "gd", "gl",
        "gv", "ho", "hr", "hu", "ia", "id", "ie", "io", "is", "it", "ki", "kl", "la",
        "lb", "lt", "lv", "mg", "mh", "mt", "nb", "nds", "nl", "nn", "no", "nr", "nso",
        "ny", "oc", "om", "pl", "pt", "rm", "ro", "se", "sk", "sl", "sma", "smj", "smn",
        "so", "sq", "ss", "st", "sv", "sw", "tk", "tl", "tn", "tr", "ts", "uz", "vo",
        "vot", "wa", "wen", "wo", "xh", "yap", "zu", "an", "crh", "csb", "fil", "hsb",
        "ht", "jv", "kj", "ku-tr", "kwm", "lg", "li", "ms", "na", "ng", "pap-an",
        "pap-aw", "rn", "rw", "sc", "sg", "sn", "su", "ty", "za", "agr", "ayc", "bem",
        "dsb", "lij", "mfe", "mjw", "nhn", "niu", "sgs", "szl", "tpi", "unm", "wae",
        "yuw",
    }
)

FC_SCAN_TIMEOUT = 8


def declares_latin(lang_output: str) -> bool:
    """Return True if a fontconfig ``%{lang}`` list names a Latin language.

    Codes may be separated by ``|``, ``,`` or whitespace.
    """
    for code in re.split(r"[|,\s]+", lang_output):
        if code.strip().lower() in LATIN_CODES:
            return True
    return False


def short_family(family: str) -> str:
    """Pick a single short family name out of a fontconfig family string.

    ``"DejaVu Sans,DejaVu Sans Condensed"`` gives ``"DejaVu Sans"``; a
    space-separated name gives its first word; a camel-cased name gives its
    first capitalized word.
    """
    fam = family.strip()
    if not fam:
        return "NA"
    if "," in fam:
        return fam.split(",", 1)[0].strip()
    if " " in fam:
        return fam.split()[0]
    match = re.search(r"[A-Z][^A-Z]*", fam)
    return match.group(0) if match else fam


def _fc_scan(path: Path, fmt: str) -> str | None:
    try:
        result = subprocess.run(
            ["fc-scan", "--format", fmt, str(path)],
            capture_output=True,
            text=True,
            timeout=FC_SCAN_TIMEOUT,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug("fc-scan unavailable for %s: %s", path, e)
        return None
    if result.returncode != 0:
        logger.debug("fc-scan failed for %s: %s", path, result.stderr.strip())
        return None
    return result.stdout


def scan_family(path: Path) -> str | None:
    """Family name as fontconfig reports it, shortened."""
    out = _fc_scan(path, "%{family}")
    if out is None:
        return None
    return short_family(out)


def scan_languages(path: Path) -> str | None:
    """Raw ``%{lang}`` output for a font file, or None without fontconfig."""
    return _fc_scan(path, "%{lang}")
