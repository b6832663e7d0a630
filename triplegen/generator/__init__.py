"""트리플 생성 패키지.

검증, 트리플 생성, 파일 분할, 실행 도우미를 제공합니다.
"""

from triplegen.generator.partitioner import TriplePartitioner
from triplegen.generator.runner import (
    GenerationResult,
    generate,
    prepare_directory,
    write_manifest,
)
from triplegen.generator.triples import Triple, TripleFactory
from triplegen.generator.validator import GenerationSettings, check_counts, validate

__all__ = [
    "GenerationResult",
    "GenerationSettings",
    "Triple",
    "TripleFactory",
    "TriplePartitioner",
    "check_counts",
    "generate",
    "prepare_directory",
    "validate",
    "write_manifest",
]
