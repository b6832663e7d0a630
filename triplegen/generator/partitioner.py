"""출력 파일 분할 모듈.

트리플 줄을 순서대로 받아 triples001.nt, triples002.nt ... 파일에 나눠 씁니다.
파일당 줄 수는 ceil(num_triples / num_files) 이며, 마지막 몇 개 파일은
열리지 않을 수도 있습니다 (예: 10개 트리플, 6개 파일 -> 2줄씩 5개 파일).
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional

from triplegen.config import DEFAULT_FILE_PATTERN
from triplegen.core.exceptions import IllegalStateError
from triplegen.core.logging import get_logger

logger = get_logger(__name__)


class TriplePartitioner:
    """한 번에 하나의 파일만 열어 두는 순차 분할기.

    상태: 현재 파일 핸들, 현재 파일의 줄 수, 마지막으로 연 파일 번호.
    with 문으로 사용하면 중간에 예외가 나도 열린 파일이 닫힙니다.
    """

    def __init__(
        self,
        directory: Path | str,
        lines_per_file: int,
        file_pattern: str = DEFAULT_FILE_PATTERN,
        encoding: str = "utf-8",
    ):
        if lines_per_file <= 0:
            raise IllegalStateError("Lines per file must be positive.")
        self.directory = Path(directory)
        self.lines_per_file = lines_per_file
        self.file_pattern = file_pattern
        self.encoding = encoding

        self._file: Optional[IO[str]] = None
        self.line_count = 0
        self.file_index = 0
        self.closed = False
        self.written_files: List[Path] = []
        self.line_counts: List[int] = []

    def __enter__(self) -> "TriplePartitioner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def file_is_open(self) -> bool:
        return self._file is not None

    @property
    def file_is_full(self) -> bool:
        return self.line_count >= self.lines_per_file

    def create_filename(self) -> str:
        return self.file_pattern.format(index=self.file_index)

    def write(self, line: str) -> None:
        """트리플 한 줄 기록.

        Raises:
            IllegalStateError: close() 이후에 호출된 경우
        """
        if self.closed:
            raise IllegalStateError("Cannot write to a closed partitioner.")
        if not self.file_is_open:
            self._open_next_file()
        self._file.write(line)
        self._file.write("\n")
        self.line_count += 1
        self.line_counts[-1] = self.line_count
        if self.file_is_full:
            self._close_file()

    def close(self) -> None:
        """열린 파일이 있으면 닫고 분할기를 종료."""
        if self.file_is_open:
            self._close_file()
        self.closed = True

    def _open_next_file(self) -> None:
        self.file_index += 1
        path = self.directory / self.create_filename()
        self._file = open(path, "w", encoding=self.encoding, newline="\n")
        self.line_count = 0
        self.written_files.append(path)
        self.line_counts.append(0)
        logger.debug(f"Opened {path.name}")

    def _close_file(self) -> None:
        self._file.close()
        self._file = None
        logger.debug(f"Closed {self.written_files[-1].name} ({self.line_count} lines)")
