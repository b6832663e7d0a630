"""인덱스 기반 트리플 생성 모듈.

선형 인덱스를 (주어, 술어, 목적어) 트리플로 결정적으로 매핑합니다.
주어/술어/목적어 개수가 서로소이면 곱 이하의 인덱스는 모두 다른 트리플이 됩니다.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Union

from rdflib import Literal, Namespace, URIRef
from rdflib.namespace import XSD

from triplegen.config import DEFAULT_NAMESPACE
from triplegen.core.exceptions import IllegalStateError
from triplegen.generator.validator import GenerationSettings


class Triple(NamedTuple):
    """N-Triples 한 줄에 해당하는 트리플."""

    subject: URIRef
    predicate: URIRef
    object: Union[URIRef, Literal]

    @property
    def line(self) -> str:
        """N-Triples 문장 (마침표 포함, 개행 제외)."""
        return f"{self.subject.n3()} {self.predicate.n3()} {self.object.n3()} ."


class TripleFactory:
    """설정과 인덱스만으로 트리플을 만드는 순수 생성기."""

    def __init__(self, settings: GenerationSettings, namespace: str = DEFAULT_NAMESPACE):
        self.settings = settings
        self.graph_ns = Namespace(namespace)

    def subject_at(self, index: int) -> URIRef:
        subject_index = 1 + index % self.settings.num_subjects
        return self.graph_ns[f"r{subject_index}"]

    def predicate_at(self, index: int) -> URIRef:
        predicate_index = 1 + index % self.settings.num_predicates
        return self.graph_ns[f"p{predicate_index}"]

    def object_at(self, index: int) -> Union[URIRef, Literal]:
        """목적어는 인덱스 % 3 에 따라 URI, 정수 리터럴, 문자열 리터럴을 순환."""
        object_index = 1 + index % self.settings.num_objects
        kind = object_index % 3
        if kind == 1:
            return self.graph_ns[f"r{object_index}"]
        if kind == 2:
            return Literal(str(object_index), datatype=XSD.integer)
        return Literal(f"string{object_index}")

    def triple_at(self, index: int) -> Triple:
        """인덱스에 해당하는 트리플 반환.

        Raises:
            IllegalStateError: 인덱스가 [0, num_triples) 범위 밖인 경우
        """
        if not 0 <= index < self.settings.num_triples:
            raise IllegalStateError(
                f"Triple index {index} is outside [0, {self.settings.num_triples}).",
                details={"index": index},
            )
        return Triple(self.subject_at(index), self.predicate_at(index), self.object_at(index))

    def iter_triples(self) -> Iterator[Triple]:
        for index in range(self.settings.num_triples):
            yield self.triple_at(index)
