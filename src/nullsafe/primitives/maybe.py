# src/nullsafe/primitives/maybe.py
from __future__ import annotations

from dataclasses import InitVar, dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, overload

from nullsafe.primitives.exceptions import direct_construction_err, nothing_access_err

__all__ = ["Maybe", "MaybeKind", "Nothing", "combine_all"]

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")
TDefault = TypeVar("TDefault")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")

# 팩토리만 알고 있는 생성 토큰
_GUARD = object()


class MaybeKind(Enum):
    """`Maybe`의 상태 태그."""

    JUST = "just"
    NOTHING = "nothing"


@dataclass(frozen=True, slots=True, repr=False)
class Maybe(Generic[TValue]):
    """값의 존재/부재를 표현하는 불변 컨테이너.

    제공 기능:
    - 생성: just_allow_none(), nothing(), from_optional(), from_condition()
    - 상태 질의: is_just(), is_nothing(), value
    - 변환: map(), map_allow_none(), filter()
    - 관찰: if_just(), if_nothing()
    - 대체값: or_else(), or_else_allow_none(), unwrap_or(), to_optional()
    - 체이닝/결합: and_then(), or_(), combine()

    생성 규칙은 두 가지입니다.

    - **엄격(strict)**: `from_optional(None)`은 Nothing이 됩니다.
    - **허용(permissive)**: `just_allow_none(None)`은 `None`을 담은 Just가 됩니다.

    생성자는 팩토리 전용입니다. `Maybe(...)`를 직접 호출하면
    `MaybeConstructionError`가 발생합니다.

    Type Parameters:
        TValue: 존재하는 값의 타입.

    Examples:
        기본 사용:
            >>> Maybe.from_optional("Hello").map(len).unwrap_or(-1)
            5
            >>> Maybe.from_optional(None).map(len).unwrap_or(-1)
            -1

        허용 생성:
            >>> Maybe.just_allow_none(None)
            Just(None)
            >>> Maybe.from_optional(None)
            Nothing

        결합:
            >>> Maybe.from_optional("Hello").combine(Maybe.from_optional("World"))
            Just(('Hello', 'World'))
    """

    _kind: MaybeKind = MaybeKind.NOTHING
    _value: Any = None
    guard: InitVar[object] = None

    def __post_init__(self, guard: object) -> None:
        if guard is not _GUARD:
            raise direct_construction_err()

    def __repr__(self) -> str:
        if self._kind is MaybeKind.NOTHING:
            return "Nothing"
        return f"Just({self._value!r})"

    def __reduce__(self):
        # Nothing는 모듈 전역 이름으로 직렬화되어 copy/pickle 후에도 싱글턴을 유지한다
        if self._kind is MaybeKind.NOTHING:
            return "Nothing"
        return (Maybe.just_allow_none, (self._value,))

    # ── 생성 ──────────────────────────────────────────────────────────────────
    @staticmethod
    def just_allow_none(value: TValue) -> "Maybe[TValue]":
        """값을 그대로 Just로 감쌉니다. `None`도 허용됩니다.

        Args:
            value: 감쌀 값.

        Returns:
            Maybe[TValue]: 항상 Just(value).
        """
        return Maybe(MaybeKind.JUST, value, _GUARD)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        """Nothing을 반환합니다."""
        return Nothing

    @staticmethod
    def from_optional(value: Optional[TValue]) -> "Maybe[TValue]":
        """옵셔널 값을 Maybe로 승격합니다.

        Args:
            value: 옵셔널 값.

        Returns:
            Maybe[TValue]: 값이 있으면 Just(value), `None`이면 Nothing.
        """
        if value is None:
            return Nothing
        return Maybe(MaybeKind.JUST, value, _GUARD)

    @staticmethod
    def from_condition(test: object, value: Optional[TValue]) -> "Maybe[TValue]":
        """조건이 참일 때만 값을 Maybe로 승격합니다.

        조건이 참이어도 `value`가 `None`이면 Nothing입니다.

        Args:
            test: 진릿값으로 평가되는 조건.
            value: 옵셔널 값.

        Returns:
            Maybe[TValue]: `test`가 거짓이면 Nothing, 아니면 `from_optional(value)`.

        Examples:
            >>> Maybe.from_condition(False, "x")
            Nothing
            >>> Maybe.from_condition(True, "x")
            Just('x')
        """
        if not test:
            return Nothing
        return Maybe.from_optional(value)

    # ── 상태 질의 ────────────────────────────────────────────────────────────
    def is_just(self) -> bool:
        """값이 존재하는지 여부."""
        return self._kind is MaybeKind.JUST

    def is_nothing(self) -> bool:
        """값이 부재인지 여부."""
        return self._kind is MaybeKind.NOTHING

    @property
    def value(self) -> TValue:
        """담긴 값.

        Nothing에서 읽으면 예외가 발생하므로, 부재를 이미 배제한 경우가
        아니라면 `unwrap_or()`를 사용하세요.

        Raises:
            MaybeAccessError: Nothing에서 읽은 경우.
        """
        if self._kind is MaybeKind.NOTHING:
            raise nothing_access_err()
        return self._value

    # ── 변환 ──────────────────────────────────────────────────────────────────
    def map(self, selector: Callable[[TValue], Optional[TNewValue]]) -> "Maybe[TNewValue]":
        """값이 있을 때만 변환합니다. 결과가 `None`이면 Nothing이 됩니다.

        Args:
            selector: TValue → TNewValue | None 함수.

        Returns:
            Maybe[TNewValue]: 변환된 maybe, 값이 없거나 결과가 `None`이면 Nothing.
        """
        if self._kind is MaybeKind.NOTHING:
            return Nothing
        return Maybe.from_optional(selector(self._value))

    def map_allow_none(self, selector: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        """값이 있을 때만 변환합니다. 결과가 `None`이어도 Just로 감쌉니다.

        Examples:
            >>> Maybe.from_optional({}).map_allow_none(lambda d: d.get("missing"))
            Just(None)
        """
        if self._kind is MaybeKind.NOTHING:
            return Nothing
        return Maybe.just_allow_none(selector(self._value))

    def filter(self, predicate: Callable[[TValue], bool]) -> "Maybe[TValue]":
        """조건을 만족하지 않으면 Nothing으로 바꿉니다.

        조건을 만족하면 **같은 인스턴스**를 그대로 반환합니다.

        Args:
            predicate: TValue → bool 함수.

        Returns:
            Maybe[TValue]: self 또는 Nothing.
        """
        if self._kind is MaybeKind.NOTHING:
            return self
        if not predicate(self._value):
            return Nothing
        return self

    # ── 관찰(부수효과) ───────────────────────────────────────────────────────
    def if_just(self, action: Callable[[TValue], Any]) -> "Maybe[TValue]":
        """값이 있을 때만 `action(value)`를 실행하고 self를 반환합니다."""
        if self._kind is MaybeKind.JUST:
            action(self._value)
        return self

    def if_nothing(self, action: Callable[[], Any]) -> "Maybe[TValue]":
        """값이 없을 때만 `action()`을 실행하고 self를 반환합니다."""
        if self._kind is MaybeKind.NOTHING:
            action()
        return self

    # ── 대체값 ────────────────────────────────────────────────────────────────
    def or_else(self, value: Optional[TValue]) -> "Maybe[TValue]":
        """Nothing이면 `from_optional(value)`로 대체합니다.

        Examples:
            >>> Maybe.nothing().or_else("GoodBye")
            Just('GoodBye')
            >>> Maybe.nothing().or_else(None)
            Nothing
        """
        if self._kind is MaybeKind.NOTHING:
            return Maybe.from_optional(value)
        return self

    def or_else_allow_none(self, value: TValue) -> "Maybe[TValue]":
        """Nothing이면 `just_allow_none(value)`로 대체합니다."""
        if self._kind is MaybeKind.NOTHING:
            return Maybe.just_allow_none(value)
        return self

    def unwrap_or(self, default: TDefault) -> TValue | TDefault:
        """값을 꺼내거나 기본값을 반환합니다.

        기본값은 정규화하지 않고 그대로 반환합니다. `None`도 그대로입니다.

        Args:
            default: 비어있을 때 반환할 기본값.

        Returns:
            TValue | TDefault: 값 또는 기본값.
        """
        if self._kind is MaybeKind.NOTHING:
            return default
        return self._value

    def to_optional(self) -> Optional[TValue]:
        """Optional로 변환합니다.

        Returns:
            Optional[TValue]: Just(v) → v, Nothing → None.
        """
        return self.unwrap_or(None)

    # ── 체이닝/결합 ──────────────────────────────────────────────────────────
    def and_then(self, binder: Callable[[TValue], "Maybe[TNewValue]"]) -> "Maybe[TNewValue]":
        """값이 있을 때만 Maybe를 반환하는 계산을 연결합니다.

        Nothing이면 `binder`를 호출하지 않습니다.

        Args:
            binder: TValue → Maybe[TNewValue] 함수.

        Returns:
            Maybe[TNewValue]: `binder`의 반환값 또는 Nothing.
        """
        if self._kind is MaybeKind.NOTHING:
            return Nothing
        return binder(self._value)

    def or_(self, alternative: "Maybe[TValue]") -> "Maybe[TValue]":
        """Nothing이면 `alternative`를 그대로 반환합니다."""
        if self._kind is MaybeKind.NOTHING:
            return alternative
        return self

    @overload
    def combine(self, m1: "Maybe[T1]", /) -> "Maybe[tuple[TValue, T1]]": ...

    @overload
    def combine(self, m1: "Maybe[T1]", m2: "Maybe[T2]", /) -> "Maybe[tuple[TValue, T1, T2]]": ...

    @overload
    def combine(
        self, m1: "Maybe[T1]", m2: "Maybe[T2]", m3: "Maybe[T3]", /
    ) -> "Maybe[tuple[TValue, T1, T2, T3]]": ...

    @overload
    def combine(
        self, m1: "Maybe[T1]", m2: "Maybe[T2]", m3: "Maybe[T3]", m4: "Maybe[T4]", /
    ) -> "Maybe[tuple[TValue, T1, T2, T3, T4]]": ...

    @overload
    def combine(
        self, m1: "Maybe[T1]", m2: "Maybe[T2]", m3: "Maybe[T3]", m4: "Maybe[T4]", m5: "Maybe[T5]", /
    ) -> "Maybe[tuple[TValue, T1, T2, T3, T4, T5]]": ...

    @overload
    def combine(self, *others: "Maybe[Any]") -> "Maybe[tuple[Any, ...]]": ...

    def combine(self, *others: "Maybe[Any]") -> "Maybe[tuple[Any, ...]]":
        """여러 Maybe의 값을 순서대로 튜플 하나로 묶습니다.

        self나 인자 중 하나라도 Nothing이면 Nothing입니다. `just_allow_none(None)`
        으로 만든 Just는 존재로 취급되어 튜플에 `None`이 들어갑니다.

        Args:
            *others: 결합할 Maybe들.

        Returns:
            Maybe[tuple]: Just((self.value, *others의 값)) 또는 Nothing.
        """
        if self._kind is MaybeKind.NOTHING or any(m.is_nothing() for m in others):
            return Nothing
        return Maybe.from_optional((self._value, *(m._value for m in others)))


Nothing: Maybe[Any] = Maybe(MaybeKind.NOTHING, None, _GUARD)


def combine_all(first: Maybe[Any], *rest: Maybe[Any]) -> Maybe[tuple[Any, ...]]:
    """여러 Maybe를 순서대로 결합합니다.

    `first.combine(*rest)`와 같습니다. 시퀀스로 들고 있는 Maybe들을
    풀어서 넘길 때 편리합니다.

    Args:
        first: 최초 Maybe.
        *rest: 순서대로 결합할 나머지 Maybe들.

    Returns:
        Maybe[tuple]: 모든 값의 튜플 또는 Nothing.

    Examples:
        >>> combine_all(*[Maybe.from_optional(1), Maybe.from_optional(2)])
        Just((1, 2))
    """
    return first.combine(*rest)
