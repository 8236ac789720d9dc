"""The registry of devices known to this process."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from lgremote.config.settings import DeviceConfig, Settings
from lgremote.domain.models import Device

logger = logging.getLogger(__name__)


class DeviceNotFoundError(KeyError):
    """Raised when no device carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Couldn't find tv {self.name}"


class Registry:
    """Ordered collection owning the canonical device records.

    Built once at startup and handed explicitly to whoever dispatches
    operations. Device names must be unique.
    """

    def __init__(self, devices: Iterable[Device] = ()) -> None:
        self._devices: dict[str, Device] = {}
        for device in devices:
            if device.name in self._devices:
                raise ValueError(f"Duplicate device name: {device.name}")
            self._devices[device.name] = device

    @classmethod
    def from_configs(cls, configs: Iterable[DeviceConfig]) -> Registry:
        return cls(
            Device(
                name=cfg.name,
                address=cfg.address,
                shared_secret=cfg.shared_secret,
                key_codes=cfg.key_codes,
            )
            for cfg in configs
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Registry:
        registry = cls.from_configs(settings.devices)
        logger.debug("Registry holds %d device(s)", len(registry))
        return registry

    def get(self, name: str) -> Device:
        """Return the device called ``name``.

        Raises:
            DeviceNotFoundError: If no device has that name.
        """
        try:
            return self._devices[name]
        except KeyError:
            raise DeviceNotFoundError(name) from None

    @property
    def names(self) -> list[str]:
        return list(self._devices)

    def __contains__(self, name: object) -> bool:
        return name in self._devices

    def __iter__(self) -> Iterator[Device]:
        return iter(self._devices.values())

    def __len__(self) -> int:
        return len(self._devices)
