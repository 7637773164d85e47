"""NPC 경로 편집 도구: 제어점 기반 3차 베지어 경로."""
