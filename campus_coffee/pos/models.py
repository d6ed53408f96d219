"""
Models for the pos app.
"""

from django.core.exceptions import ValidationError
from django.db import models


class PosType(models.TextChoices):
    """Kind of point of sale."""

    CAFE = "CAFE", "Café"
    BAKERY = "BAKERY", "Bakery"
    VENDING_MACHINE = "VENDING_MACHINE", "Vending Machine"
    CAFETERIA = "CAFETERIA", "Cafeteria"


class CampusType(models.TextChoices):
    """Campus a point of sale belongs to."""

    ALTSTADT = "ALTSTADT", "Altstadt"
    BERGHEIM = "BERGHEIM", "Bergheim"
    INF = "INF", "Im Neuenheimer Feld"


class Pos(models.Model):
    """
    Model representing a Point of Sale in the campus coffee catalog.

    Names are unique across the catalog; the database constraint is the
    final arbiter when two writers race on the same name.
    """

    REQUIRED_TEXT_FIELDS = ("name", "street", "house_number", "city")

    id = models.AutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    type = models.CharField(max_length=32, choices=PosType.choices, db_index=True)
    campus = models.CharField(
        max_length=32, choices=CampusType.choices, db_index=True
    )
    street = models.CharField(max_length=255)
    house_number = models.CharField(max_length=255)
    postal_code = models.IntegerField()
    city = models.CharField(max_length=255)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["name"], name="unique_pos_name"),
        ]
        indexes = [
            models.Index(fields=["campus", "type"], name="pos_campus_type_idx"),
        ]
        verbose_name = "point of sale"
        verbose_name_plural = "points of sale"

    def __str__(self) -> str:
        return f"{self.name} ({self.get_type_display()}, {self.city})"

    def clean(self) -> None:
        """
        Reject required text fields that only contain whitespace.
        """
        super().clean()

        errors = {}
        for field_name in self.REQUIRED_TEXT_FIELDS:
            value = getattr(self, field_name)
            if value is None or not str(value).strip():
                errors[field_name] = "This field may not be blank."

        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs) -> None:
        """
        Validate before saving. Name uniqueness is left to the database.
        """
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    @property
    def address(self) -> str:
        """
        Single-line postal address.
        """
        return f"{self.street} {self.house_number}, {self.postal_code} {self.city}"
