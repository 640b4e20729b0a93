"""Encapsulates the serializers producing render-ready scoreboard snapshots."""
from rest_framework import serializers

from bowling import fields

import collections


class BaseSerializer(serializers.Serializer, object):

    def to_representation(self, instance):
        """Return just errors if applicable, and exclude errors otherwise."""
        ret = super(BaseSerializer, self).to_representation(instance)
        # If error exists, then all fields should be removed.
        if 'errors' in ret and ret.get('errors'):
            return collections.OrderedDict(errors=ret['errors'])

        return collections.OrderedDict((k, v) for k, v in ret.items()
                                       if k != 'errors')


class ErrorSerializer(serializers.Serializer):
    """Representation of any errors."""
    error_code = serializers.IntegerField()
    error_message = serializers.CharField(max_length=200)


class FrameSerializer(serializers.Serializer):
    """A frame as shown on the scoreboard.

    The score stays empty until the first ball of the frame is bowled.
    """
    frame = serializers.SerializerMethodField()
    marks = serializers.ListField(
        child=fields.BallMarkField(), source='balls', read_only=True)
    score = serializers.SerializerMethodField()
    bonus_balls_pending = serializers.IntegerField(read_only=True)

    def get_frame(self, instance):
        return instance.index + 1

    def get_score(self, instance):
        return instance.score if instance.balls else None


class BowlerSerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    state = serializers.CharField(read_only=True)
    frames = FrameSerializer(many=True, read_only=True)
    total_score = serializers.IntegerField(read_only=True)

    def to_representation(self, instance):
        """Adds the running total to every frame that has been bowled."""
        ret = super(BowlerSerializer, self).to_representation(instance)
        for frame, running_total in zip(ret['frames'],
                                        instance.running_totals):
            frame['running_total'] = (
                running_total if frame['score'] is not None else None)
        return ret


class MatchSerializer(BaseSerializer):
    """Encapsulates the scoreboard of all bowlers of a match."""
    frame = serializers.SerializerMethodField()
    current_bowler = serializers.SerializerMethodField()
    is_complete = serializers.BooleanField(read_only=True)
    bowlers = BowlerSerializer(many=True, read_only=True)
    winners = serializers.SerializerMethodField()
    errors = ErrorSerializer(required=False, many=True, read_only=True)

    def get_frame(self, instance):
        return instance.current_frame + 1

    def get_current_bowler(self, instance):
        bowler = instance.current_bowler
        return bowler.name if bowler is not None else None

    def get_winners(self, instance):
        if not instance.is_complete:
            return []
        return [bowler.name for bowler in instance.winners()]
