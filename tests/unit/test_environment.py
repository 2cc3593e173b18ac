"""test_environment.py

Unit tests for prefixsid.environment modules
"""

from typing import Any

import pytest

from prefixsid.environment import getenv, Environment
from prefixsid.environment import parsing
from prefixsid.environment.base import _find_root, APPLICATION, ENVFILE, ETC
from prefixsid.environment.config import ConfigSection, option


class TestConfigOption:
    """Test ConfigOption descriptor"""

    def test_option_default(self) -> None:
        """Test ConfigOption returns default value"""

        class TestSection(ConfigSection):
            _section_name = 'test'
            value: bool = option(True, 'test option')

        section = TestSection()
        assert section.value is True

    def test_option_set(self) -> None:
        """Test ConfigOption can be set"""

        class TestSection(ConfigSection):
            _section_name = 'test'
            value: int = option(3, 'test option')

        section = TestSection()
        section.value = 8
        assert section.value == 8

    def test_option_dict_access(self) -> None:
        """Test ConfigSection supports dict-style access"""

        class TestSection(ConfigSection):
            _section_name = 'test'
            test_key: str = option('value', 'test option')

        section = TestSection()
        assert section['test_key'] == 'value'
        assert section['test-key'] == 'value'
        assert 'test_key' in section
        assert list(section) == ['test_key']

    def test_parse_uses_default_type(self) -> None:
        """Test values are parsed by the type of their default"""

        class TestSection(ConfigSection):
            _section_name = 'test'
            flag: bool = option(False, 'a boolean')
            count: int = option(1, 'an integer')
            name: str = option('x', 'a string')

        options = TestSection.options()
        assert options['flag'].parse('yes') is True
        assert options['flag'].parse('off') is False
        assert options['count'].parse('12') == 12
        assert options['name'].parse("'quoted'") == 'quoted'

    def test_custom_reader(self) -> None:
        options: dict[str, Any] = Environment().decode.options()
        assert options['siblings'].parse('5') == 5
        with pytest.raises(TypeError):
            options['siblings'].parse('-1')


class TestParsing:
    def test_boolean(self) -> None:
        for value in ('1', 'yes', 'on', 'enable', 'true', 'TRUE'):
            assert parsing.boolean(value) is True
        for value in ('0', 'no', 'off', 'false', ''):
            assert parsing.boolean(value) is False

    def test_positive(self) -> None:
        assert parsing.positive('0') == 0
        assert parsing.positive(7) == 7
        with pytest.raises(TypeError):
            parsing.positive('-3')
        with pytest.raises(ValueError):
            parsing.positive('three')

    def test_quote(self) -> None:
        assert parsing.string(' "value" ') == 'value'
        assert parsing.quoted('value') == "'value'"
        assert parsing.lowercase(True) == 'true'

    def test_log_level(self) -> None:
        assert parsing.log_level('debug') == 'DEBUG'
        assert parsing.log_level(' INFO ') == 'INFO'
        with pytest.raises(TypeError):
            parsing.log_level('LOUD')


class TestBase:
    def test_application(self) -> None:
        assert APPLICATION == 'prefixsid'
        assert ENVFILE.startswith(ETC)
        assert ENVFILE.endswith('prefixsid.env')

    def test_find_root_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PREFIXSID_ROOT', '/opt/prefixsid/bin')
        assert _find_root() == '/opt/prefixsid'

    def test_find_root_from_source_tree(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PREFIXSID_ROOT', '/home/user/prefixsid/src/prefixsid/application')
        assert _find_root() == '/home/user/prefixsid'


class TestEnvironment:
    """Test the Environment singleton"""

    def test_singleton(self) -> None:
        assert Environment() is Environment()

    def test_defaults(self) -> None:
        env = getenv()
        assert env.decode.siblings == 3
        assert env.log.enable is True
        assert env.log.parser is False
        assert env.debug.pdb is False

    def test_section_access(self) -> None:
        env = Environment()
        assert env['decode'] is env.decode
        assert 'log' in env
        assert 'nothing' not in env
        assert list(env) == ['log', 'decode', 'debug']

    def test_dotted_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('prefixsid.decode.siblings', '8')
        assert getenv().decode.siblings == 8

    def test_underscore_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('prefixsid_log_parser', 'true')
        assert getenv().log.parser is True

    def test_dotted_variable_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('prefixsid.decode.siblings', '8')
        monkeypatch.setenv('prefixsid_decode_siblings', '9')
        assert getenv().decode.siblings == 8

    def test_ini_file(self, tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('prefixsid.decode.siblings', raising=False)
        monkeypatch.delenv('prefixsid_decode_siblings', raising=False)
        envfile = tmp_path / 'prefixsid.env'
        envfile.write_text('[prefixsid.decode]\nsiblings = 12\n\n[prefixsid.log]\nlevel = DEBUG\n')
        Environment.setup(str(envfile))
        env = Environment()
        assert env.decode.siblings == 12
        assert env.log.level == 'DEBUG'

    def test_environment_beats_ini(self, tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> None:
        envfile = tmp_path / 'prefixsid.env'
        envfile.write_text('[prefixsid.decode]\nsiblings = 12\n')
        monkeypatch.setenv('prefixsid_decode_siblings', '1')
        Environment.setup(str(envfile))
        assert Environment().decode.siblings == 1

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('prefixsid_decode_siblings', '-2')
        with pytest.raises(ValueError, match='decode.siblings'):
            getenv()

    def test_setup_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        getenv()
        monkeypatch.setenv('prefixsid_decode_siblings', '6')
        assert getenv().decode.siblings == 3
        Environment.reset()
        assert getenv().decode.siblings == 6

    def test_default_lines(self) -> None:
        lines = list(Environment.default())
        assert any(line.startswith('prefixsid.decode.siblings') for line in lines)
        assert not any('pdb' in line for line in lines)

    def test_iter_ini(self) -> None:
        lines = list(Environment.iter_ini())
        assert '\n[prefixsid.decode]' in lines
        assert 'siblings = 3' in lines

    def test_iter_ini_diff(self) -> None:
        env = Environment()
        env.decode.siblings = 9
        assert list(Environment.iter_ini(diff=True)) == ['\n[prefixsid.decode]', 'siblings = 9']

    def test_iter_env(self) -> None:
        lines = list(Environment.iter_env())
        assert 'prefixsid.decode.siblings=3' in lines
        assert "prefixsid.log.destination='stderr'" in lines

    def test_iter_env_diff(self) -> None:
        Environment().log.parser = True
        assert list(Environment.iter_env(diff=True)) == ['prefixsid.log.parser=true']
