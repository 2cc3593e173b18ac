"""test_behavior.py

Unit tests for the SRv6 Endpoint Behavior names.
"""

import pytest

from prefixsid.sr.behavior import ENDPOINT_BEHAVIORS, name_for


class TestEndpointBehavior:
    @pytest.mark.parametrize(
        'code,name',
        [
            (0, 'Reserved'),
            (1, 'End'),
            (4, 'End with PSP & USP'),
            (5, 'End.X'),
            (9, 'End.T'),
            (16, 'End.DX6'),
            (17, 'End.DX4'),
            (18, 'End.DT6'),
            (19, 'End.DT4'),
            (20, 'End.DT46'),
            (25, 'Reserved'),
            (43, 'End with NEXT-CSID'),
            (74, 'End.M (Mirror SID)'),
            (100, 'End.PSID'),
            (155, 'End.XU with REPLACE-CSID'),
            (156, 'End.XU with REPLACE-CSID & PSP'),
            (157, 'End.XU with REPLACE-CSID & PSP & USP & USD'),
            (32767, 'The SID defined in [RFC8754]'),
            (65535, 'Opaque'),
        ],
    )
    def test_assigned(self, code: int, name: str) -> None:
        assert name_for(code) == name

    @pytest.mark.parametrize('code', [32768, 33000, 34815])
    def test_private_use(self, code: int) -> None:
        assert name_for(code) == 'Reserved for Private Use'

    @pytest.mark.parametrize('code', [34816, 40000, 65534])
    def test_reserved_range(self, code: int) -> None:
        assert name_for(code) == 'Reserved'

    @pytest.mark.parametrize('code', [84, 99, 111, 113, 136, 158, 9999, 32766])
    def test_unassigned(self, code: int) -> None:
        assert name_for(code) == 'Unassigned'

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ENDPOINT_BEHAVIORS[1] = 'changed'  # type: ignore[index]

    def test_table_size(self) -> None:
        assert len(ENDPOINT_BEHAVIORS) == 116

    def test_replace_spelling(self) -> None:
        assert not [name for name in ENDPOINT_BEHAVIORS.values() if 'REPPLACE' in name]
