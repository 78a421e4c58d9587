"""Pontos admin."""

from django.contrib import admin
from django.utils.html import format_html

from pontos.models import Client, Promotion, Transaction


# ===========================================
# Client Admin
# ===========================================


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    fields = ["created_at", "transaction_type", "amount", "points", "multiplier"]
    readonly_fields = ["created_at", "transaction_type", "amount", "points", "multiplier"]
    ordering = ["-created_at"]
    max_num = 20

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "cpf_display", "phone_display", "points", "bonus"]
    search_fields = ["code", "name", "cpf", "phone"]
    ordering = ["-points", "name"]
    readonly_fields = ["uuid", "code", "points", "bonus", "created_at", "updated_at"]
    inlines = [TransactionInline]

    fieldsets = [
        ("Identificação", {"fields": ["code", "uuid", "name", "cpf", "phone"]}),
        ("Saldo", {"fields": ["points", "bonus"]}),
        ("Sistema", {"fields": ["created_at", "updated_at"], "classes": ["collapse"]}),
    ]

    def cpf_display(self, obj):
        return obj.cpf_display

    cpf_display.short_description = "CPF"

    def phone_display(self, obj):
        return obj.phone_display

    phone_display.short_description = "Telefone"

    def has_delete_permission(self, request, obj=None):
        return False


# ===========================================
# Promotion Admin
# ===========================================


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ["name", "multiplier", "starts_on", "ends_on", "status_badge"]
    list_filter = ["is_active"]
    search_fields = ["name"]

    def status_badge(self, obj):
        if obj.effective_active:
            return format_html('<span style="color:green">{}</span>', "Ativa")
        if obj.is_active:
            return format_html('<span style="color:#b58900">{}</span>', "Expirada")
        return format_html('<span style="color:#6c757d">{}</span>', "Inativa")

    status_badge.short_description = "Status"


# ===========================================
# Transaction Admin
# ===========================================


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = [
        "created_at",
        "client_code",
        "transaction_type",
        "amount",
        "points_display",
        "multiplier",
    ]
    list_filter = ["transaction_type"]
    search_fields = ["client__code", "client__name", "client__cpf"]
    readonly_fields = ["client", "transaction_type", "amount", "points", "multiplier", "created_at"]
    date_hierarchy = "created_at"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def client_code(self, obj):
        return obj.client.code

    client_code.short_description = "Cliente"

    def points_display(self, obj):
        if obj.points > 0:
            return format_html('<span style="color:green">+{}</span>', obj.points)
        return format_html('<span style="color:red">{}</span>', obj.points)

    points_display.short_description = "Pontos"
