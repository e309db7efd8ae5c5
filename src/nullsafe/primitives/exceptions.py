# src/nullsafe/primitives/exceptions.py
"""`Maybe` 사용 오류 타입과 생성자 함수.

개요:
    `Maybe`는 실패를 값으로 다루는 컨테이너이지만, **잘못된 사용**(직접 생성,
    Nothing에서 값 읽기)은 호출부의 버그이므로 예외로 즉시 드러냅니다.
    모든 오류는 안정적인 `code` 문자열과 사람이 읽는 `message`를 함께 가집니다.

특징:
    * 안정적인 코드 체계: ``"maybe_direct_construction"``, ``"maybe_nothing_access"``.
    * 고정 메시지는 모듈 상수로 두고, 생성자 함수가 매번 새 예외를 만듭니다.
      (예외 객체는 traceback을 보관하므로 싱글턴으로 재사용하지 않습니다.)

예시:
    >>> err = nothing_access_err()
    >>> err.code
    'maybe_nothing_access'
    >>> isinstance(err, MaybeError)
    True
"""

from __future__ import annotations

__all__ = [
    # 타입
    "MaybeError",
    "MaybeConstructionError",
    "MaybeAccessError",
    # 생성자
    "direct_construction_err",
    "nothing_access_err",
]


# ──────────────────────────────────────────────────────────────
# 기본 타입
# ──────────────────────────────────────────────────────────────
class MaybeError(Exception):
    """`Maybe` 오용을 나타내는 예외의 베이스.

    Attributes:
        code: 오류 코드(영문 소문자/밑줄). 예: ``"maybe_nothing_access"``.
        message: 사용자 또는 로그 출력용 메시지.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class MaybeConstructionError(MaybeError):
    """팩토리를 거치지 않고 `Maybe`를 직접 생성하려 할 때 발생합니다."""


class MaybeAccessError(MaybeError):
    """Nothing `Maybe`의 값을 읽으려 할 때 발생합니다."""


# ──────────────────────────────────────────────────────────────
# 고정 메시지
# ──────────────────────────────────────────────────────────────
_DIRECT_CONSTRUCTION_CODE = "maybe_direct_construction"
_DIRECT_CONSTRUCTION_MSG = (
    "Direct construction of Maybe is not possible. "
    "Please use Maybe.just_allow_none, Maybe.nothing or Maybe.from_optional instead."
)
_NOTHING_ACCESS_CODE = "maybe_nothing_access"
_NOTHING_ACCESS_MSG = "Cannot read value of a Nothing maybe. Use unwrap_or instead."


def direct_construction_err() -> MaybeConstructionError:
    """직접 생성 금지 오류를 만듭니다.

    Returns:
        MaybeConstructionError: 코드 ``"maybe_direct_construction"``.
            메시지에 올바른 팩토리 이름 세 개가 포함됩니다.

    Examples:
        >>> "Maybe.from_optional" in direct_construction_err().message
        True
    """
    return MaybeConstructionError(_DIRECT_CONSTRUCTION_CODE, _DIRECT_CONSTRUCTION_MSG)


def nothing_access_err() -> MaybeAccessError:
    """Nothing 값 접근 오류를 만듭니다.

    Returns:
        MaybeAccessError: 코드 ``"maybe_nothing_access"``.
    """
    return MaybeAccessError(_NOTHING_ACCESS_CODE, _NOTHING_ACCESS_MSG)
