"""
Puen-Jai Heart Console

상심한 사람을 위한 AI 위로 대화 백엔드
- 페르소나 프롬프트 기반 답장 생성
- 서버 과부하(503) 시 지수 백오프 재시도
- 대화 기록 저장 및 최신순 조회
"""

__version__ = "1.0.0"
__author__ = "Puen-Jai Team"
