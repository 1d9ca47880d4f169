"""
App layer: UI 서버 (FastAPI + HTMX).

역할:
- 템플릿 목록/생성, 템플릿 기반 파일 생성 API
- 사용자 액션은 services/templater.py에 위임

주의: 폴더 구분
- src/templates/ → 코드 (store.py, renderer.py, generator.py)
- templates/ (루트) → 기본 템플릿 저장소
"""
