# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection base classes and context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..cancel import CancelFlag
from ..commands import CommandRunner
from ..config import Options, PlatformConfig
from ..http import NetworkClient
from ..models import DetectionResult


@dataclass
class DetectionContext:
    config: PlatformConfig
    net: NetworkClient
    commands: CommandRunner
    options: Options = field(default_factory=Options)
    cancel_flag: CancelFlag = field(default_factory=CancelFlag)


class DetectionStrategy(ABC):
    name: str = "base"

    @abstractmethod
    def detect(self, context: DetectionContext) -> DetectionResult: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}()"
