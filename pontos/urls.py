from django.urls import path

from . import views

app_name = "pontos"

urlpatterns = [
    path("login/", views.LoginView.as_view(), name="login"),
    path("logout/", views.LogoutView.as_view(), name="logout"),
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
    path("clients/", views.ClientListView.as_view(), name="clients"),
    path("promotions/", views.PromotionListView.as_view(), name="promotions"),
    path(
        "promotions/<int:pk>/toggle/",
        views.PromotionToggleView.as_view(),
        name="promotion-toggle",
    ),
    path(
        "promotions/<int:pk>/delete/",
        views.PromotionDeleteView.as_view(),
        name="promotion-delete",
    ),
    path("purchases/", views.PurchaseView.as_view(), name="purchases"),
    path(
        "purchases/new-client/",
        views.PurchaseNewClientView.as_view(),
        name="purchase-new-client",
    ),
    path("withdrawals/", views.WithdrawalView.as_view(), name="withdrawals"),
    path("transactions/", views.TransactionListView.as_view(), name="transactions"),
    path(
        "reports/daily-withdrawals/",
        views.DailyWithdrawalReportView.as_view(),
        name="daily-withdrawals",
    ),
]
