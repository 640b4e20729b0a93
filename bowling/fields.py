"""Encapsulates the ball marks used on the scoreboard and in scripted games."""

import re

from django.core import exceptions
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers


BALL_MARKS = ('X', '/', '-') + tuple(str(pins) for pins in range(10))


def validate_mark(value):
    if value not in BALL_MARKS:
        raise exceptions.ValidationError(
            ('The ball mark \'%(value)s\' is invalid. The mark must be '
             'between 0 and 9, \'X\', \'/\' or \'-\'.' % {'value': value}))


def parse_marks(text):
    """Parses a scripted ball sequence.

    Marks are separated by commas and/or whitespace, e.g. ``X, 7 / 9,-``.

    Returns:
        the list of validated marks
    """
    marks = [mark for mark in re.split(r'[\s,]+', text.strip()) if mark]
    if not marks:
        raise exceptions.ValidationError('No balls were given.')
    for mark in marks:
        validate_mark(mark)
    return marks


class BallMarkField(serializers.Field):
    """Renders a ball as its scoreboard mark."""
    description = _('The scoreboard mark of a ball.')

    def __init__(self, *args, **kwargs):
        kwargs['read_only'] = True
        super(BallMarkField, self).__init__(*args, **kwargs)

    def to_representation(self, value):
        return value.mark
