import datetime

from django import template
from django.utils import timezone
from django.utils.dateparse import parse_datetime

register = template.Library()

ROTULOS_STATUS = {
    'ATIVA': 'Ativa',
    'ALTA': 'Alta',
    'pendente': 'Pendente',
    'aprovada': 'Aprovada',
    'rejeitada': 'Rejeitada',
}


def _parse(value):
    """Aware datetime from an API timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
    elif not value:
        return None
    else:
        try:
            parsed = parse_datetime(str(value))
        except ValueError:
            return None
        if parsed is None:
            return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, datetime.timezone.utc)
    return parsed


@register.filter
def data_br(value):
    """ISO timestamp -> ``dd/mm/aaaa``, read in UTC so midnight dates don't shift."""
    parsed = _parse(value)
    return parsed.astimezone(datetime.timezone.utc).strftime('%d/%m/%Y') if parsed else ''


@register.filter
def data_hora_br(value):
    """ISO timestamp -> ``dd/mm/aaaa hh:mm`` in ``TIME_ZONE``."""
    parsed = _parse(value)
    return timezone.localtime(parsed).strftime('%d/%m/%Y %H:%M') if parsed else ''


@register.filter
def data_input(value):
    """ISO timestamp -> ``aaaa-mm-dd`` for ``<input type="date">``."""
    parsed = _parse(value)
    return parsed.astimezone(datetime.timezone.utc).strftime('%Y-%m-%d') if parsed else ''


@register.filter
def rotulo_status(value):
    return ROTULOS_STATUS.get(value, value)
