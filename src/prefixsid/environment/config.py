"""config.py

Typed configuration for prefixsid.

Each ConfigSection subclass declares its options with option(); the
Environment singleton holds one instance of each section. A value is taken,
in order, from the environment (prefixsid.section.option, then
prefixsid_section_option), the INI file etc/prefixsid/prefixsid.env, and
finally the option default.
"""

from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Generic, Iterator, TypeVar, cast

from prefixsid.environment import base
from prefixsid.environment import parsing

T = TypeVar('T')

# how a string is read for a given default type, bool before int as bool is an int
_READERS: tuple[tuple[type, Callable[[str], Any]], ...] = (
    (bool, parsing.boolean),
    (int, parsing.integer),
    (str, parsing.string),
)

_WRITERS: tuple[tuple[type, Callable[[Any], str]], ...] = (
    (bool, parsing.lowercase),
    (str, parsing.quoted),
)


@dataclass
class ConfigOption(Generic[T]):
    """Descriptor storing its value in the owning section."""

    default: T
    help: str
    reader: Callable[[str], T] | None = None
    writer: Callable[[T], str] | None = None
    name: str = field(default='', init=False)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, owner: type) -> Any:
        if obj is None:
            return self
        return obj._values.get(self.name, self.default)

    def __set__(self, obj: Any, value: T) -> None:
        obj._values[self.name] = value

    def parse(self, value: str) -> T:
        if self.reader is not None:
            return self.reader(value)
        for kind, reader in _READERS:
            if isinstance(self.default, kind):
                return cast(T, reader(value))
        raise TypeError(f'no reader for {type(self.default).__name__} options')

    def format(self, value: T) -> str:
        if self.writer is not None:
            return self.writer(value)
        for kind, writer in _WRITERS:
            if isinstance(self.default, kind):
                return writer(value)
        return str(value)


def option(
    default: T,
    help: str,
    reader: Callable[[str], T] | None = None,
    writer: Callable[[T], str] | None = None,
) -> T:
    """Declare a section option, typed as its value for the type checker."""
    return cast(T, ConfigOption(default, help, reader, writer))


class ConfigSection:
    _section_name: ClassVar[str] = ''
    # not shown by prefixsid env
    _hidden: ClassVar[bool] = False

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @classmethod
    def options(cls) -> dict[str, ConfigOption[Any]]:
        """The options of the section, in declaration order."""
        found: dict[str, ConfigOption[Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, ConfigOption):
                    found[name] = value
        return found

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key.replace('-', '_'))

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self, key.replace('-', '_'), value)

    def __contains__(self, key: str) -> bool:
        return key.replace('-', '_') in self.options()

    def __iter__(self) -> Iterator[str]:
        return iter(self.options())

    def items(self) -> Iterator[tuple[str, Any]]:
        for name in self.options():
            yield name, getattr(self, name)


_DESTINATION_HELP: str = 'where logging should log: syslog, stdout, stderr or file:<filename>'


class LogSection(ConfigSection):
    _section_name: ClassVar[str] = 'log'

    enable: bool = option(True, 'enable logging')
    level: str = option(
        'INFO',
        'log message with at least the priority SYSLOG.<level>',
        reader=parsing.log_level,
        writer=parsing.log_level,
    )
    destination: str = option('stderr', _DESTINATION_HELP)
    all: bool = option(False, 'report debug information for everything')
    configuration: bool = option(False, 'report configuration loading')
    parser: bool = option(False, 'report Prefix-SID TLV parsing details')
    short: bool = option(True, 'use short log format (not prepended with time,level,pid)')


class DecodeSection(ConfigSection):
    _section_name: ClassVar[str] = 'decode'

    siblings: int = option(
        3,
        'stop decoding a TLV level once more than this many sibling TLVs were seen',
        reader=parsing.positive,
    )


class DebugSection(ConfigSection):
    _section_name: ClassVar[str] = 'debug'
    _hidden: ClassVar[bool] = True

    pdb: bool = option(False, 'enable python debugger on errors')


SECTIONS: tuple[type[ConfigSection], ...] = (LogSection, DecodeSection, DebugSection)


def _lookup(ini: configparser.ConfigParser, section: str, name: str) -> str | None:
    dotted = f'{base.APPLICATION}.{section}.{name}'
    for variable in (dotted, dotted.replace('.', '_')):
        if variable in os.environ:
            return os.environ[variable]
    try:
        return parsing.string(ini.get(f'{base.APPLICATION}.{section}', name, raw=True))
    except (configparser.NoSectionError, configparser.NoOptionError):
        return None


class Environment:
    """The configuration singleton, loaded once by setup()."""

    _instance: ClassVar[Environment | None] = None
    _setup_done: ClassVar[bool] = False

    log: LogSection
    decode: DecodeSection
    debug: DebugSection

    def __new__(cls) -> Environment:
        if cls._instance is None:
            instance = super().__new__(cls)
            for klass in SECTIONS:
                setattr(instance, klass._section_name, klass())
            cls._instance = instance
        return cls._instance

    def _sections(self, hidden: bool = True) -> Iterator[tuple[str, ConfigSection]]:
        for klass in SECTIONS:
            if hidden or not klass._hidden:
                yield klass._section_name, self[klass._section_name]

    @classmethod
    def setup(cls, envfile: str = base.ENVFILE) -> None:
        if cls._setup_done:
            return
        cls._setup_done = True

        ini = configparser.ConfigParser()
        if os.path.exists(envfile):
            ini.read(envfile)

        for section_name, section in cls()._sections():
            for name, opt in section.options().items():
                conf = _lookup(ini, section_name, name)
                if conf is None:
                    continue
                try:
                    section[name] = opt.parse(conf)
                except (TypeError, ValueError):
                    raise ValueError(f'invalid value for {section_name}.{name} : {conf}') from None

    @classmethod
    def reset(cls) -> None:
        """Forget every loaded value, the next setup() reads the environment again."""
        cls._instance = None
        cls._setup_done = False

    def __getitem__(self, key: str) -> ConfigSection:
        section: ConfigSection = getattr(self, key.replace('-', '_'))
        return section

    def __contains__(self, key: str) -> bool:
        return any(key.replace('-', '_') == klass._section_name for klass in SECTIONS)

    def __iter__(self) -> Iterator[str]:
        return (klass._section_name for klass in SECTIONS)

    def keys(self) -> Iterator[str]:
        return iter(self)

    @classmethod
    def default(cls) -> Iterator[str]:
        """One line per option: name, help and default."""
        for section_name, section in cls()._sections(hidden=False):
            for name, opt in section.options().items():
                default = f"'{opt.default}'" if isinstance(opt.default, str) else opt.default
                key = f'{base.APPLICATION}.{section_name}.{name}'
                yield f'{key:<34} {opt.help}. default ({default})'

    @classmethod
    def iter_ini(cls, diff: bool = False) -> Iterator[str]:
        for section_name, section in cls()._sections(hidden=False):
            changed = [(name, opt) for name, opt in section.options().items() if not diff or section[name] != opt.default]
            if not changed:
                continue
            yield f'\n[{base.APPLICATION}.{section_name}]'
            for name, opt in changed:
                yield f'{name} = {opt.format(section[name])}'

    @classmethod
    def iter_env(cls, diff: bool = False) -> Iterator[str]:
        for section_name, section in cls()._sections(hidden=False):
            for name, opt in section.options().items():
                value = section[name]
                if diff and value == opt.default:
                    continue
                text = f"'{value}'" if isinstance(opt.default, str) else opt.format(value)
                yield f'{base.APPLICATION}.{section_name}.{name}={text}'
