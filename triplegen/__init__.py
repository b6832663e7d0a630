"""triplegen: 적재 성능 테스트용 합성 N-Triples 생성기."""

__version__ = "1.0.0"
