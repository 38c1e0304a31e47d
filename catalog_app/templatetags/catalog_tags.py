import json

from django import template
from django.core.serializers.json import DjangoJSONEncoder

register = template.Library()


@register.filter
def to_json(value):
    """Pretty-print a value as JSON."""
    return json.dumps(value, indent=2, cls=DjangoJSONEncoder)
