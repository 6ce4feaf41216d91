"""Claro Inventory - In-memory stores for serialized assets and RMA records.

Both stores are keyed by upper-cased serial and keep insertion order for
stable display. Each owns an RLock; services hold it across a whole
read-check-write sequence. When both are needed, take the ledger lock first.
"""
import threading
from collections.abc import Iterable

from claro_inventory.models.asset import SerializedAsset, normalize_serial
from claro_inventory.models.rma import RmaRecord


class DuplicateKeyError(KeyError):
    """Raised when inserting a serial that is already stored."""


class AssetRegistry:
    """serial -> SerializedAsset."""

    def __init__(self, assets: Iterable[SerializedAsset] = ()):
        self.lock = threading.RLock()
        self._assets: dict[str, SerializedAsset] = {}
        for asset in assets:
            self.add(asset)

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, serial: str) -> bool:
        return normalize_serial(serial) in self._assets

    def get(self, serial: str) -> SerializedAsset | None:
        with self.lock:
            asset = self._assets.get(normalize_serial(serial))
            return asset.model_copy() if asset else None

    def add(self, asset: SerializedAsset) -> None:
        with self.lock:
            if asset.serial in self._assets:
                raise DuplicateKeyError(asset.serial)
            self._assets[asset.serial] = asset.model_copy()

    def replace(self, asset: SerializedAsset) -> None:
        """Swap the stored record for an updated one, keeping its position."""
        with self.lock:
            if asset.serial not in self._assets:
                raise KeyError(asset.serial)
            self._assets[asset.serial] = asset.model_copy()

    def remove(self, serial: str) -> SerializedAsset:
        with self.lock:
            return self._assets.pop(normalize_serial(serial))

    def snapshot(self) -> list[SerializedAsset]:
        with self.lock:
            return [a.model_copy() for a in self._assets.values()]


class RmaLedger:
    """serial -> RmaRecord. Records are append-only."""

    def __init__(self, records: Iterable[RmaRecord] = ()):
        self.lock = threading.RLock()
        self._records: dict[str, RmaRecord] = {}
        for record in records:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, serial: str) -> bool:
        return normalize_serial(serial) in self._records

    def get(self, serial: str) -> RmaRecord | None:
        with self.lock:
            return self._records.get(normalize_serial(serial))

    def add(self, record: RmaRecord) -> None:
        with self.lock:
            if record.serial in self._records:
                raise DuplicateKeyError(record.serial)
            self._records[record.serial] = record

    def snapshot(self) -> list[RmaRecord]:
        # RmaRecord is frozen, sharing instances is safe
        with self.lock:
            return list(self._records.values())
