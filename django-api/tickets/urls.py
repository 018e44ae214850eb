from django.urls import path

from tickets.handlers import PurchaseView

urlpatterns = [
    path("purchases", PurchaseView.as_view(), name="purchase"),
]
