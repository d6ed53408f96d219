"""
Tests for Django admin functionality.
"""

from unittest.mock import MagicMock

from django.contrib.admin.sites import AdminSite
from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from pos.admin import PosAdmin
from pos.exceptions import DuplicatePosNameError
from pos.models import CampusType, Pos, PosType
from tests.factories import BakeryPosFactory, PosFactory

User = get_user_model()


class TestAdminSearchAndFilters(TestCase):
    """Test admin search and filter functionality."""

    def setUp(self):
        self.factory = RequestFactory()
        self.site = AdminSite()
        self.admin = PosAdmin(Pos, self.site)

        self.cafe = PosFactory(
            name="Admin Test Cafe", type=PosType.CAFE, city="Heidelberg"
        )
        self.bakery = BakeryPosFactory(name="Admin Test Bakery", city="Heidelberg")
        self.mensa = PosFactory(
            name="Zentralmensa",
            type=PosType.CAFETERIA,
            campus=CampusType.INF,
            city="Heidelberg",
        )

        self.superuser = User.objects.create_superuser(
            username="admin", email="admin@test.com", password="testpass123"
        )

    def changelist_queryset(self, query: str):
        request = self.factory.get(f"/admin/pos/pos/{query}")
        request.user = self.superuser
        changelist = self.admin.get_changelist_instance(request)
        return changelist.get_queryset(request)

    def test_admin_search_by_internal_id(self):
        queryset = self.changelist_queryset(f"?q={self.cafe.id}")

        self.assertIn(self.cafe, queryset)

    def test_admin_search_by_name_partial(self):
        queryset = self.changelist_queryset("?q=Admin+Test")

        self.assertEqual(queryset.count(), 2)
        self.assertNotIn(self.mensa, queryset)

    def test_admin_type_filter(self):
        queryset = self.changelist_queryset("?type__exact=BAKERY")

        self.assertEqual(list(queryset), [self.bakery])

    def test_admin_campus_filter(self):
        queryset = self.changelist_queryset("?campus__exact=INF")

        self.assertEqual(list(queryset), [self.mensa])

    def test_address_display(self):
        pos = PosFactory.build(
            street="Hauptstraße", house_number="120", postal_code=69117, city="Heidelberg"
        )

        self.assertEqual(
            self.admin.address_display(pos), "Hauptstraße 120, 69117 Heidelberg"
        )


class TestAdminSaveModel(TestCase):
    """Test that admin saves go through the POS service."""

    def setUp(self):
        self.factory = RequestFactory()
        self.admin = PosAdmin(Pos, AdminSite())
        self.admin.message_user = MagicMock()
        self.request = self.factory.post("/admin/pos/pos/add/")

    def test_save_model_creates(self):
        pos = PosFactory.build(name="Admin Created")

        self.admin.save_model(self.request, pos, form=None, change=False)

        self.assertIsNotNone(pos.id)
        self.assertTrue(Pos.objects.filter(name="Admin Created").exists())
        self.admin.message_user.assert_not_called()

    def test_save_model_duplicate_name_raises(self):
        PosFactory(name="Taken")
        pos = PosFactory.build(name="Taken")

        with self.assertRaises(DuplicatePosNameError):
            self.admin.save_model(self.request, pos, form=None, change=False)

        self.assertIsNone(pos.id)
        self.assertEqual(Pos.objects.filter(name="Taken").count(), 1)
