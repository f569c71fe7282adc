from __future__ import annotations

import enum
from dataclasses import dataclass, field

import mergedeep
import yaml
from mashumaro.mixins.dict import DataClassDictMixin


class OutputFormat(str, enum.Enum):
    TEXT = "text"
    JSON = "json"

    def __repr__(self) -> str:
        return self.value


@dataclass
class Log:
    slim: bool = False
    level: str = "WARNING"
    show_timestamp: bool = False
    show_level: bool = True

    def __post_init__(self) -> None:
        self.level = self.level.upper()


@dataclass
class Report:
    # how the resolved document is written to stdout
    output: OutputFormat = OutputFormat.TEXT
    # append the tests, states and objects listings after the definitions
    show_index: bool = True
    # exit non-zero after rendering when any definition has unresolved references
    strict: bool = False
    # stop at the first unresolved reference instead of collecting all of them
    fail_fast: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.output, OutputFormat):
            self.output = OutputFormat(self.output)


@dataclass
class Application(DataClassDictMixin):
    log: Log = field(default_factory=Log)
    report: Report = field(default_factory=Report)


def load(path: str = ".ovaldef.yaml") -> Application:
    try:
        with open(path, encoding="utf-8") as f:
            app_object = yaml.safe_load(f.read()) or {}
            # start from a fully populated default config and merge the file on top, so a file that sets
            # a single nested field keeps the defaults of its sibling fields
            instance = Application().to_dict()

            mergedeep.merge(instance, app_object)
            cfg = Application.from_dict(instance)
            if cfg is None:
                raise FileNotFoundError("parsed empty config")
    except FileNotFoundError:
        cfg = Application()

    return cfg
