"""Built-in error attributes and their accessors."""

from errorkit.attributes.debug_info import DebugInfo, debug_info_of
from errorkit.attributes.localization import Localization, localization_of
from errorkit.attributes.rank import Rank, highest_rank, rank_of
from errorkit.attributes.severity import Severity, highest_severity, severity_of
from errorkit.attributes.source import Source, source_of
from errorkit.attributes.tag import Tag, tags_of
from errorkit.attributes.trace import Trace, trace_of
from errorkit.attributes.user_level import UserLevel, user_level_of

__all__ = [
    "DebugInfo",
    "Localization",
    "Rank",
    "Severity",
    "Source",
    "Tag",
    "Trace",
    "UserLevel",
    "debug_info_of",
    "highest_rank",
    "highest_severity",
    "localization_of",
    "rank_of",
    "severity_of",
    "source_of",
    "tags_of",
    "trace_of",
    "user_level_of",
]
