"""입력 개수 검증 모듈.

다섯 개의 개수(트리플, 파일, 주어, 술어, 목적어)를 검증하고
불변 설정 객체를 만듭니다. 파일 입출력은 하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Sequence

from triplegen.core.exceptions import UserInputError

USAGE_TEXT = (
    "Usage is ld4l_generate_triples <dir> <num_triples> <num_files> "
    "<num_subjects> <num_predicates> <num_objects> [OVERWRITE]"
)

COUNT_NAMES = ("triples", "files", "subjects", "predicates", "objects")


@dataclass(frozen=True)
class GenerationSettings:
    """검증된 생성 설정."""

    num_triples: int
    num_files: int
    num_subjects: int
    num_predicates: int
    num_objects: int

    @property
    def max_combinations(self) -> int:
        """중복 없이 만들 수 있는 최대 트리플 수."""
        return self.num_subjects * self.num_predicates * self.num_objects

    @property
    def lines_per_file(self) -> int:
        """파일당 최대 줄 수 (올림)."""
        return -(-self.num_triples // self.num_files)

    def describe(self) -> str:
        return (
            f"triples = {self.num_triples}, files = {self.num_files}, "
            f"subjects = {self.num_subjects}, predicates = {self.num_predicates}, "
            f"objects = {self.num_objects}"
        )


def _parse_count(name: str, raw: str) -> int:
    try:
        return int(str(raw).strip())
    except ValueError:
        raise UserInputError(
            f"Number of {name} must be an integer.",
            details={"argument": name, "value": raw},
        ) from None


def check_counts(
    num_triples: int,
    num_files: int,
    num_subjects: int,
    num_predicates: int,
    num_objects: int,
) -> GenerationSettings:
    """정수 개수를 검증하고 설정 반환.

    첫 번째로 발견된 위반 사항에서 즉시 UserInputError를 발생시킵니다.
    """
    counts = (num_triples, num_files, num_subjects, num_predicates, num_objects)
    for name, value in zip(COUNT_NAMES, counts):
        if value <= 0:
            raise UserInputError(f"Number of {name} must be positive.")

    settings = GenerationSettings(*counts)

    if settings.num_files > settings.num_triples:
        raise UserInputError("Number of files must not be more than the number of triples.")
    if settings.num_triples > settings.max_combinations:
        raise UserInputError(
            "Number of triples must not be larger than the number of combinations.",
            details={"max_combinations": settings.max_combinations},
        )

    # 서로소여야 인덱스 매핑이 곱보다 짧은 주기로 반복되지 않음
    if not (
        gcd(num_subjects, num_objects) == 1
        and gcd(num_subjects, num_predicates) == 1
        and gcd(num_predicates, num_objects) == 1
    ):
        raise UserInputError("Numbers of subject, predicates and objects must be relatively prime.")

    return settings


def validate(raw_counts: Sequence[str]) -> GenerationSettings:
    """다섯 개의 위치 인자를 검증.

    Args:
        raw_counts: 트리플, 파일, 주어, 술어, 목적어 개수 (문자열)

    Returns:
        GenerationSettings

    Raises:
        UserInputError: 인자 개수가 다르거나 검증에 실패한 경우
    """
    if raw_counts is None or len(raw_counts) != len(COUNT_NAMES):
        raise UserInputError(USAGE_TEXT)

    parsed = [_parse_count(name, raw) for name, raw in zip(COUNT_NAMES, raw_counts)]
    return check_counts(*parsed)
