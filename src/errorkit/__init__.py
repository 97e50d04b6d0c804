"""errorkit: attach typed, provenance-tracked attributes to errors."""

from errorkit.attribute import (
    EnumErrorAttribute,
    ErrorAttribute,
    LeveledErrorAttribute,
)
from errorkit.attributes import (
    DebugInfo,
    Localization,
    Rank,
    Severity,
    Source,
    Tag,
    Trace,
    UserLevel,
    debug_info_of,
    highest_rank,
    highest_severity,
    localization_of,
    rank_of,
    severity_of,
    source_of,
    tags_of,
    trace_of,
    user_level_of,
)
from errorkit.description import DescriptionSettings, describe
from errorkit.envelope import (
    AttributedBaseException,
    AttributedError,
    AttributeEntry,
    IdentifiableError,
    attach,
    base_of,
    identifiable,
    wrap,
)
from errorkit.identity import (
    IdentityGenerationError,
    IdentityGenerator,
    generate_error_id,
    set_identity_generator,
    use_identity_generator,
)
from errorkit.provenance import SourceProvenance, capture_provenance
from errorkit.query import attribute_of, attributes_of

__all__ = [
    "AttributeEntry",
    "AttributedBaseException",
    "AttributedError",
    "DebugInfo",
    "DescriptionSettings",
    "EnumErrorAttribute",
    "ErrorAttribute",
    "IdentifiableError",
    "IdentityGenerationError",
    "IdentityGenerator",
    "LeveledErrorAttribute",
    "Localization",
    "Rank",
    "Severity",
    "Source",
    "SourceProvenance",
    "Tag",
    "Trace",
    "UserLevel",
    "attach",
    "attribute_of",
    "attributes_of",
    "base_of",
    "capture_provenance",
    "debug_info_of",
    "describe",
    "generate_error_id",
    "highest_rank",
    "highest_severity",
    "identifiable",
    "localization_of",
    "rank_of",
    "set_identity_generator",
    "severity_of",
    "source_of",
    "tags_of",
    "trace_of",
    "use_identity_generator",
    "user_level_of",
    "wrap",
]
