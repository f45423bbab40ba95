"""Switch/case to backpatched three-address code translator."""

from .api import (  # noqa: F401
    translate_switch_case,
    translate_document,
    dump_code,
    quad_stats,
)
from .run_types import (  # noqa: F401
    DuplicateDefaultPolicy,
    TranslationConfig,
    TranslationResult,
)
from .switch import DEFAULT, CaseEntry, DuplicateDefaultCaseError  # noqa: F401
