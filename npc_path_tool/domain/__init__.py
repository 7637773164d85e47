"""경로 도메인 레이어.

외부 레이어(usecase/infra/presentation)에 대한 의존성이 없다.
"""
