# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
The DigitalColor contract.

A digital color is an immutable value with named channels. Every channel
can be modified independently, and every value is always clamped into the
color space's domain. The contract is written once here; concrete color
types only declare:

- ``channel_type``: the Enum of addressable channels
- ``channel_fields``: a mapping from every channel member to a field name
- ``domain``: the inclusive ``(lo, hi)`` legal range of every channel

Missing a channel in ``channel_fields`` is a ``TypeError`` at class
definition time, so adding a channel forces the color type to handle it.
"""

from __future__ import annotations

import dataclasses
import inspect
import operator
from abc import ABC
from enum import Enum
from functools import partial
from typing import Callable, ClassVar, Generic, Mapping, TypeVar

from webswatch.errors import InvalidArgumentError

ChannelT = TypeVar("ChannelT", bound=Enum)
ColorT = TypeVar("ColorT", bound="DigitalColor")


class DigitalColor(ABC, Generic[ChannelT]):
    """
    Mixin for frozen dataclass color types.

    Subclasses must be frozen dataclasses whose fields are the channel
    values. All operations return a new instance of the concrete type.
    """

    __slots__ = ()

    channel_type: ClassVar[type[Enum]]
    channel_fields: ClassVar[Mapping[Enum, str]]
    domain: ClassVar[tuple[int, int]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "channel_fields" not in cls.__dict__:
            return
        missing = [c for c in cls.channel_type if c not in cls.channel_fields]
        if missing:
            raise TypeError(
                f"{cls.__name__} does not map channels: "
                + ", ".join(c.name for c in missing)
            )
        annotations = inspect.get_annotations(cls)
        unknown = [f for f in cls.channel_fields.values() if f not in annotations]
        if unknown:
            raise TypeError(
                f"{cls.__name__} maps channels to unknown fields: {unknown}"
            )

    def __post_init__(self) -> None:
        """Validate that every channel value is an integer in the domain."""
        lo, hi = self.domain
        for name in self.channel_fields.values():
            value = operator.index(getattr(self, name))
            if not lo <= value <= hi:
                raise InvalidArgumentError(
                    f"{type(self).__name__}.{name} must be {lo}-{hi}, got {value}"
                )
            object.__setattr__(self, name, int(value))

    @classmethod
    def clamp(cls, value: float) -> int:
        """
        Saturate ``value`` into the channel domain.

        Fractional values are truncated toward zero after saturation.
        Idempotent: ``clamp(clamp(x)) == clamp(x)``.
        """
        lo, hi = cls.domain
        if value != value:  # NaN
            return lo
        if value < lo:
            return lo
        if value > hi:
            return hi
        return int(value)

    def _field_for(self, channel: Enum) -> str:
        if not isinstance(channel, self.channel_type):
            raise TypeError(
                f"{type(self).__name__} has no channel {channel!r}; "
                f"expected a {self.channel_type.__name__}"
            )
        return self.channel_fields[channel]

    def channel(self, channel: ChannelT) -> int:
        """Read the current value of ``channel``."""
        return getattr(self, self._field_for(channel))

    def channels(self) -> tuple[int, ...]:
        """All channel values in channel-enum order."""
        return tuple(getattr(self, self.channel_fields[c]) for c in self.channel_type)

    def modify_channel(
        self: ColorT,
        channel: ChannelT,
        transform: Callable[[int], float],
    ) -> ColorT:
        """
        Apply ``transform`` to one channel and clamp the result.

        The clamp is applied even when ``transform`` is the identity.
        Other channels are carried over unchanged.
        """
        name = self._field_for(channel)
        value = self.clamp(transform(getattr(self, name)))
        return dataclasses.replace(self, **{name: value})

    def channel_modifier(
        self: ColorT,
        channel: ChannelT,
    ) -> Callable[[Callable[[int], float]], ColorT]:
        """Partially applied ``modify_channel``: ``c.channel_modifier(ch)(f)``."""
        return partial(self.modify_channel, channel)

    def increase_channel(self: ColorT, channel: ChannelT, delta: int) -> ColorT:
        """Add ``delta`` (may be negative) to one channel, clamped."""
        return self.modify_channel(channel, lambda v: v + delta)
