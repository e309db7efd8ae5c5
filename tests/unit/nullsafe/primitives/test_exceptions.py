# tests/unit/nullsafe/primitives/test_exceptions.py
import pytest

from nullsafe.primitives.exceptions import (
    MaybeAccessError,
    MaybeConstructionError,
    MaybeError,
    direct_construction_err,
    nothing_access_err,
)

pytestmark = [pytest.mark.unit]


class TestMaybeErrors:
    def test_direct_construction_err(self):
        """GIVEN 없음
           WHEN direct_construction_err()를 호출하면
           THEN 고정 코드와 세 팩토리 이름을 담은 메시지를 가진다
        """
        err = direct_construction_err()
        assert isinstance(err, MaybeConstructionError)
        assert isinstance(err, MaybeError)
        assert err.code == "maybe_direct_construction"
        for name in ("Maybe.just_allow_none", "Maybe.nothing", "Maybe.from_optional"):
            assert name in err.message
        assert str(err) == err.message

    def test_nothing_access_err(self):
        """GIVEN 없음
           WHEN nothing_access_err()를 호출하면
           THEN unwrap_or 사용을 안내한다
        """
        err = nothing_access_err()
        assert isinstance(err, MaybeAccessError)
        assert err.code == "maybe_nothing_access"
        assert "unwrap_or" in err.message

    def test_factories_return_fresh_instances(self):
        """GIVEN 같은 팩토리
           WHEN 두 번 호출하면
           THEN 서로 다른 예외 인스턴스를 반환한다
        """
        assert nothing_access_err() is not nothing_access_err()
        assert direct_construction_err() is not direct_construction_err()

    def test_repr_includes_code(self):
        """GIVEN nothing_access_err()
           WHEN repr을 호출하면
           THEN 오류 코드가 포함된다
        """
        assert "maybe_nothing_access" in repr(nothing_access_err())
