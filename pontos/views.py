"""
Counter API.

JSON endpoints used by the store front-end. Everything except login sits
behind the session gate: anonymous requests are redirected to LOGIN_URL.

Errors:
    PontosError *_NOT_FOUND -> 404
    other PontosError       -> 400
    unexpected              -> 500 (logged)
"""

from __future__ import annotations

import json
import logging
from datetime import date

from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpResponse, JsonResponse
from django.utils.dateparse import parse_date
from django.views import View

from pontos.exceptions import PontosError
from pontos.pdf import DailyWithdrawalPDF
from pontos.services import clients as client_service
from pontos.services import promotions as promotion_service
from pontos.services import purchases as purchase_service
from pontos.services import reports as report_service
from pontos.services import withdrawals as withdrawal_service

logger = logging.getLogger("pontos.views")


class BadRequest(Exception):
    pass


def _payload(request) -> dict:
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except (json.JSONDecodeError, ValueError):
            raise BadRequest("Invalid JSON")
        if not isinstance(data, dict):
            raise BadRequest("Invalid JSON")
        return data
    return request.POST.dict()


def _date_or_none(value) -> date | None:
    if not value:
        return None
    try:
        parsed = parse_date(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise BadRequest(f"Invalid date: {value}")
    return parsed


def _client_dict(client) -> dict:
    return {
        "id": client.pk,
        "name": client.name,
        "cpf": client.cpf,
        "cpf_display": client.cpf_display,
        "code": client.code,
        "phone": client.phone,
        "phone_display": client.phone_display,
        "points": client.points,
        "bonus": str(client.bonus),
    }


def _promotion_dict(promotion) -> dict:
    return {
        "id": promotion.pk,
        "name": promotion.name,
        "multiplier": promotion.multiplier,
        "is_active": promotion.is_active,
        "effective_active": promotion.effective_active,
        "starts_on": promotion.starts_on.isoformat() if promotion.starts_on else None,
        "ends_on": promotion.ends_on.isoformat() if promotion.ends_on else None,
    }


class PontosView(LoginRequiredMixin, View):
    """Session-gated JSON view with PontosError mapping."""

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except PontosError as exc:
            status = 404 if exc.is_not_found else 400
            return JsonResponse({"error": exc.as_dict()}, status=status)
        except BadRequest as exc:
            return JsonResponse({"error": {"code": "BAD_REQUEST", "message": str(exc)}}, status=400)
        except Exception:
            logger.exception("Pontos API: %s %s failed", request.method, request.path)
            return JsonResponse({"error": {"code": "INTERNAL", "message": "Internal error"}}, status=500)


# =============================================================================
# Session
# =============================================================================


class LoginView(View):
    def post(self, request):
        try:
            data = _payload(request)
        except BadRequest as exc:
            return JsonResponse({"error": {"code": "BAD_REQUEST", "message": str(exc)}}, status=400)

        user = authenticate(
            request,
            username=data.get("username", ""),
            password=data.get("password", ""),
        )
        if user is None:
            logger.warning("Pontos login failed for %r", data.get("username", ""))
            return JsonResponse(
                {"error": {"code": "INVALID_CREDENTIALS", "message": "Usuário ou senha inválidos"}},
                status=401,
            )

        login(request, user)
        return JsonResponse({"status": "ok", "username": user.get_username()})


class LogoutView(PontosView):
    def post(self, request):
        logout(request)
        return JsonResponse({"status": "ok"})


# =============================================================================
# Dashboard & clients
# =============================================================================


class DashboardView(PontosView):
    def get(self, request):
        return JsonResponse(report_service.dashboard().as_dict())


class ClientListView(PontosView):
    def get(self, request):
        clients = client_service.search(request.GET.get("q", ""))
        return JsonResponse({"results": [_client_dict(c) for c in clients]})


# =============================================================================
# Promotions
# =============================================================================


class PromotionListView(PontosView):
    def get(self, request):
        if request.GET.get("valid"):
            promotions = promotion_service.list_valid()
        else:
            promotions = promotion_service.list_all()
        return JsonResponse({"results": [_promotion_dict(p) for p in promotions]})

    def post(self, request):
        data = _payload(request)
        promotion = promotion_service.create(
            name=data.get("name", ""),
            multiplier=data.get("multiplier", 2),
            starts_on=_date_or_none(data.get("starts_on")),
            ends_on=_date_or_none(data.get("ends_on")),
        )
        return JsonResponse(_promotion_dict(promotion), status=201)


class PromotionToggleView(PontosView):
    def post(self, request, pk):
        return JsonResponse(_promotion_dict(promotion_service.toggle(pk)))


class PromotionDeleteView(PontosView):
    def post(self, request, pk):
        promotion_service.delete(pk)
        return JsonResponse({"status": "deleted"})

    def delete(self, request, pk):
        return self.post(request, pk)


# =============================================================================
# Purchases & withdrawals
# =============================================================================


class PurchaseView(PontosView):
    """
    POST {"identifier", "amount", "promotion_id"?}

    Unknown client -> 404 with action "create_client"; the front-end then
    collects name and phone and posts to PurchaseNewClientView.
    """

    def post(self, request):
        data = _payload(request)
        try:
            confirmation = purchase_service.register_purchase(
                data.get("identifier", ""),
                data.get("amount"),
                data.get("promotion_id"),
            )
        except PontosError as exc:
            if exc.code != "CLIENT_NOT_FOUND":
                raise
            return JsonResponse(
                {"error": exc.as_dict(), "action": "create_client"},
                status=404,
            )
        return JsonResponse(confirmation.as_dict(), status=201)


class PurchaseNewClientView(PontosView):
    """POST {"identifier" (CPF), "name", "phone", "amount", "promotion_id"?}"""

    def post(self, request):
        data = _payload(request)
        confirmation = purchase_service.register_purchase_for_new_client(
            cpf=data.get("identifier", "") or data.get("cpf", ""),
            name=data.get("name", ""),
            phone=data.get("phone", ""),
            amount=data.get("amount"),
            promotion_id=data.get("promotion_id"),
        )
        return JsonResponse(confirmation.as_dict(), status=201)


class WithdrawalView(PontosView):
    """POST {"identifier", "amount"} -> balances + receipt."""

    def post(self, request):
        data = _payload(request)
        result = withdrawal_service.withdraw_bonus(
            data.get("identifier", ""),
            data.get("amount"),
        )
        return JsonResponse(result.as_dict(), status=201)


# =============================================================================
# History & reports
# =============================================================================


class TransactionListView(PontosView):
    def get(self, request):
        results = [
            {
                "id": tx.pk,
                "created_at": tx.created_at.isoformat(),
                "client_name": tx.client.name,
                "client_code": tx.client.code,
                "type": tx.transaction_type,
                "type_display": tx.get_transaction_type_display(),
                "amount": str(tx.amount),
                "points": tx.points,
                "multiplier": tx.multiplier,
            }
            for tx in report_service.recent_transactions()
        ]
        return JsonResponse({"results": results})


class DailyWithdrawalReportView(PontosView):
    """GET ?date=YYYY-MM-DD&format=json|csv|pdf"""

    def get(self, request):
        report = report_service.daily_withdrawals(_date_or_none(request.GET.get("date")))
        export = request.GET.get("format", "json")

        if export == "pdf":
            return DailyWithdrawalPDF(report).generate_response()
        if export == "csv":
            response = HttpResponse(report.to_csv(), content_type="text/csv; charset=utf-8")
            response["Content-Disposition"] = f'attachment; filename="{report.filename_stem}.csv"'
            return response
        return JsonResponse(report.as_dict())
