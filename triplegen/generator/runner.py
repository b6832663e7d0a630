"""트리플 생성 실행 모듈.

대상 디렉토리 준비, 매니페스트 기록, 트리플 생성과 파일 분할을 묶습니다.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from triplegen.config import (
    DEFAULT_FILE_PATTERN,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_NAMESPACE,
)
from triplegen.core.exceptions import UserInputError
from triplegen.core.logging import get_logger
from triplegen.generator.partitioner import TriplePartitioner
from triplegen.generator.triples import TripleFactory
from triplegen.generator.validator import GenerationSettings

logger = get_logger(__name__)

MANIFEST_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"


@dataclass
class GenerationResult:
    """생성 실행 결과 요약."""

    directory: Path
    files: List[Path] = field(default_factory=list)
    line_counts: List[int] = field(default_factory=list)

    @property
    def total_triples(self) -> int:
        return sum(self.line_counts)

    @property
    def file_count(self) -> int:
        return len(self.files)


def delete_directory_contents(directory: Path | str) -> int:
    """숨김 항목(.으로 시작)을 제외한 디렉토리 내용 삭제.

    Returns:
        삭제한 항목 수
    """
    removed = 0
    for entry in sorted(Path(directory).iterdir()):
        if entry.name.startswith("."):
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        removed += 1
    return removed


def prepare_directory(path: Path | str, overwrite: bool = False) -> Path:
    """출력 디렉토리 준비.

    Args:
        path: 대상 디렉토리 (상대 경로, ~ 허용)
        overwrite: 이미 존재하면 내용을 지우고 재사용

    Returns:
        절대 경로

    Raises:
        UserInputError: 부모 디렉토리가 없거나, OVERWRITE 없이 이미 존재하는 경우
    """
    dir_path = Path(os.path.abspath(os.path.expanduser(str(path))))
    if not dir_path.parent.is_dir():
        raise UserInputError(f"Can't create {dir_path}: no parent directory.")

    if dir_path.exists():
        if not dir_path.is_dir():
            raise UserInputError(f"{dir_path} is not a directory.")
        if not overwrite:
            raise UserInputError(f"{dir_path} already exists -- specify OVERWRITE")
        removed = delete_directory_contents(dir_path)
        logger.info(f"Cleared {removed} entries from {dir_path}")
    else:
        dir_path.mkdir()
        logger.info(f"Created {dir_path}")

    return dir_path


def write_manifest(
    directory: Path | str,
    args: Sequence[str],
    manifest_name: str = DEFAULT_MANIFEST_NAME,
    now: Optional[datetime] = None,
) -> Path:
    """실행 시각과 원래 인자 목록을 매니페스트로 기록."""
    now = now or datetime.now().astimezone()
    manifest_path = Path(directory) / manifest_name
    with open(manifest_path, "w", encoding="utf-8") as f:
        f.write(now.strftime(MANIFEST_TIME_FORMAT) + "\n")
        f.write(" ".join(str(a) for a in args) + "\n")
    return manifest_path


def generate(
    directory: Path | str,
    settings: GenerationSettings,
    namespace: str = DEFAULT_NAMESPACE,
    file_pattern: str = DEFAULT_FILE_PATTERN,
    encoding: str = "utf-8",
) -> GenerationResult:
    """모든 트리플을 인덱스 순서대로 생성해 파일에 분할 기록."""
    factory = TripleFactory(settings, namespace)
    with TriplePartitioner(
        directory,
        settings.lines_per_file,
        file_pattern=file_pattern,
        encoding=encoding,
    ) as partitioner:
        for triple in factory.iter_triples():
            partitioner.write(triple.line)

    result = GenerationResult(
        directory=Path(directory),
        files=list(partitioner.written_files),
        line_counts=list(partitioner.line_counts),
    )
    logger.info(
        f"Wrote {result.total_triples} triples to {result.file_count} files",
        extra={"extra_fields": {"triples": result.total_triples, "files": result.file_count}},
    )
    return result

