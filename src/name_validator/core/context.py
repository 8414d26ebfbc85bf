from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


@dataclass
class ValidationContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    full_report_path: Optional[str] = None
    json_report_path: Optional[str] = None

    name_column: Optional[str] = None
    filter_problems: bool = False
    chunk_size: Optional[int] = None
    workers: Optional[int] = None
    progress: Optional[Callable[[int, int], None]] = None

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
