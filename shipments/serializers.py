"""
Shipment Search Serializers

Validates the manual filter widgets sent alongside a search query.
Parameter names match the shipments listing API.
"""

from rest_framework import serializers

from loyal.config import config
from .services import ManualFilters
from .services.trade_gazetteers import COMPARISON_SYMBOLS

SORT_DIRECTIONS = ("asc", "desc")


class ManualFiltersSerializer(serializers.Serializer):
    """Query params of GET /api/v1/shipments/search/listing/."""
    totalValueOp = serializers.ChoiceField(choices=COMPARISON_SYMBOLS, required=False)
    totalValue = serializers.FloatField(required=False)
    containerCountOp = serializers.ChoiceField(choices=COMPARISON_SYMBOLS, required=False)
    containerCount = serializers.FloatField(required=False)
    weightOp = serializers.ChoiceField(choices=COMPARISON_SYMBOLS, required=False)
    weight = serializers.FloatField(required=False)
    balanceOp = serializers.ChoiceField(choices=COMPARISON_SYMBOLS, required=False)
    balance = serializers.FloatField(required=False)

    etaFrom = serializers.DateField(required=False)
    etaTo = serializers.DateField(required=False)

    pol = serializers.CharField(required=False, max_length=100)
    pod = serializers.CharField(required=False, max_length=100)
    product = serializers.CharField(required=False, max_length=100)
    status = serializers.CharField(required=False, max_length=50)

    sortBy = serializers.CharField(required=False, max_length=50)
    sortDir = serializers.ChoiceField(choices=SORT_DIRECTIONS, required=False)
    sortTouched = serializers.BooleanField(required=False, default=False)

    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, default=config.search.default_page_size)

    def validate(self, attrs):
        eta_from, eta_to = attrs.get("etaFrom"), attrs.get("etaTo")
        if eta_from and eta_to and eta_from > eta_to:
            raise serializers.ValidationError({"etaTo": "etaTo must not be before etaFrom"})
        return attrs

    def to_manual_filters(self) -> ManualFilters:
        data = self.validated_data
        eta_from, eta_to = data.get("etaFrom"), data.get("etaTo")
        return ManualFilters(
            total_value_op=data.get("totalValueOp"),
            total_value=data.get("totalValue"),
            container_count_op=data.get("containerCountOp"),
            container_count=data.get("containerCount"),
            weight_op=data.get("weightOp"),
            weight=data.get("weight"),
            balance_op=data.get("balanceOp"),
            balance=data.get("balance"),
            date_from=eta_from.isoformat() if eta_from else None,
            date_to=eta_to.isoformat() if eta_to else None,
            origin=data.get("pol"),
            destination=data.get("pod"),
            product=data.get("product"),
            status=data.get("status"),
            sort_column=data.get("sortBy"),
            sort_direction=data.get("sortDir"),
            sort_touched=data.get("sortTouched", False),
            page=data.get("page", 1),
            limit=data.get("limit", config.search.default_page_size),
        )
