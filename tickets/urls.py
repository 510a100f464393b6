from django.urls import path

from tickets.handlers import PurchaseView

urlpatterns = [
    path(
        "accounts/<int:account_id>/purchases",
        PurchaseView.as_view(),
        name="purchase-create",
    ),
]
