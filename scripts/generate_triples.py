#!/usr/bin/env python3
"""
의미 없는 트리플 파일 생성 스크립트.

지정한 디렉토리에 중복 없는 트리플을 여러 .nt 파일로 나눠 생성합니다.
주어, 술어, 목적어 개수는 서로소여야 하며, 트리플 수는 세 개수의 곱 이하여야 합니다.
술어 개수는 주어 개수보다 훨씬 작게 잡는 것이 실제 데이터와 비슷합니다.

사용법:
    python scripts/generate_triples.py <dir> <num_triples> <num_files> <num_subjects> <num_predicates> <num_objects> [OVERWRITE]
    python scripts/generate_triples.py /tmp/out 1000000 10 10007 11 1009
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from triplegen.cli import main


if __name__ == "__main__":
    sys.exit(main())
