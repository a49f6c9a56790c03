from __future__ import annotations


class Book:
    """Kütüphanedeki tek bir kitap kaydını temsil eder."""

    def __init__(self, id: int, name: str, quantity: int = 0) -> None:
        self._id = id
        self._name = name
        # Ödünç verilebilecek mevcut kopya sayısı
        self.quantity = quantity

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        return self.quantity > 0

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} (ID: {self.id}, Quantity: {self.quantity})"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, name={self.name!r}, quantity={self.quantity!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
        }
