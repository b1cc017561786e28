"""URL routing for the booking wizard and account booking pages (namespace: bookings)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views

app_name = "bookings"

urlpatterns = [
    path("booking/step1/<str:package_id>", views.step1, name="step1"),
    path("booking/step2", views.step2, name="step2"),
    path("booking/review", views.review, name="review"),
    path("booking/checkout", views.checkout, name="checkout"),
    path("booking/payment", views.payment, name="payment"),
    path("booking/process-payment", views.process_payment, name="process_payment"),
    path("booking/success/<str:booking_id>", views.success, name="success"),
    path("my-bookings", views.my_bookings, name="my_bookings"),
    path("booking/edit/<str:booking_id>", views.edit, name="edit"),
    path("booking/update/<str:booking_id>", views.update, name="update"),
    path("booking/delete/<str:booking_id>", views.delete, name="delete"),
]
