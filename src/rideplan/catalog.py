"""Static vehicle tier, payment method and tip catalogs.

Catalogs are built once at import and never mutated. Lookups raise the
matching NotFoundError subclass so callers can surface a rider notice.
"""

from collections.abc import Iterator
from typing import Generic, Protocol, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rideplan.core.exceptions import (
    ConfigurationError,
    NotFoundError,
    UnknownPaymentMethod,
    UnknownTier,
    UnknownTipOption,
)


class VehicleTier(BaseModel):
    """Priced category of vehicle."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str
    base_price: float = Field(ge=0)
    price_per_km: float = Field(ge=0)
    min_price: float = Field(ge=0)

    @model_validator(mode="after")
    def validate_floor(self) -> Self:
        if self.min_price < self.base_price:
            raise ValueError(
                f"Tier {self.id}: min_price {self.min_price} is below base_price {self.base_price}"
            )
        return self


class PaymentMethod(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str


class TipOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(gt=0)
    label: str

    @property
    def id(self) -> str:
        return f"{self.amount:g}"


class _CatalogEntry(Protocol):
    @property
    def id(self) -> str: ...


EntryT = TypeVar("EntryT", bound=_CatalogEntry)


class Catalog(Generic[EntryT]):
    """Read-only ordered table keyed by entry id."""

    not_found_error: type[NotFoundError] = NotFoundError

    def __init__(self, entries: tuple[EntryT, ...]) -> None:
        if not entries:
            raise ConfigurationError(f"{type(self).__name__} requires at least one entry")
        by_id: dict[str, EntryT] = {}
        for entry in entries:
            if entry.id in by_id:
                raise ConfigurationError(f"Duplicate catalog id: {entry.id}")
            by_id[entry.id] = entry
        self._entries = entries
        self._by_id = by_id

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._by_id)

    def first(self) -> EntryT:
        return self._entries[0]

    def find(self, entry_id: str) -> EntryT | None:
        return self._by_id.get(entry_id)

    def get(self, entry_id: str) -> EntryT:
        entry = self._by_id.get(entry_id)
        if entry is None:
            raise self.not_found_error(
                f"Unknown {type(self).__name__} id: {entry_id}",
                details={"id": entry_id, "known_ids": list(self._by_id)},
            )
        return entry


class TierCatalog(Catalog[VehicleTier]):
    not_found_error = UnknownTier


class PaymentMethodCatalog(Catalog[PaymentMethod]):
    not_found_error = UnknownPaymentMethod


class TipCatalog(Catalog[TipOption]):
    not_found_error = UnknownTipOption

    def get_amount(self, amount: float) -> TipOption:
        for option in self:
            if option.amount == amount:
                return option
        raise UnknownTipOption(
            f"Unknown tip amount: {amount}",
            details={"amount": amount, "offered": [o.amount for o in self]},
        )


VEHICLE_TIERS = TierCatalog(
    (
        VehicleTier(
            id="sari", display_name="Sarı Taksi", base_price=42.00, price_per_km=28.00, min_price=135.00
        ),
        VehicleTier(
            id="turkuaz",
            display_name="Turkuaz Taksi",
            base_price=46.58,
            price_per_km=31.05,
            min_price=155.25,
        ),
        VehicleTier(
            id="vip", display_name="VIP Taksi", base_price=68.85, price_per_km=45.90, min_price=229.50
        ),
        VehicleTier(
            id="xl", display_name="8+1 Taksi", base_price=52.65, price_per_km=35.10, min_price=175.50
        ),
    )
)

PAYMENT_METHODS = PaymentMethodCatalog(
    (
        PaymentMethod(id="cash", display_name="Nakit"),
        PaymentMethod(id="card", display_name="Kredi Kartı"),
    )
)

TIP_OPTIONS = TipCatalog(
    (
        TipOption(amount=50, label="50 TL"),
        TipOption(amount=100, label="100 TL"),
        TipOption(amount=150, label="150 TL"),
    )
)

DEFAULT_PAYMENT_METHOD_ID = "cash"
