"""Module that encapsulates all service functions.
"""
import logging

from bowling import conf
from bowling import exceptions
from bowling import models as bowling_models
from bowling import serializers


def register_match(names):
    """Registers the bowlers of a match and returns the match instance.

    Bowlers bowl in the order of ``names``. If the names are not acceptable,
    the returned match has no bowlers and carries the errors instead.
    """
    names = [name.strip() for name in names]
    match_object = bowling_models.Match()
    max_players = conf.get_setting('MAX_PLAYERS')
    name_max_length = conf.get_setting('NAME_MAX_LENGTH')

    if not names:
        match_object.add_error(bowling_models.Error(
            error_code=400, error_message='At least one bowler is required.'))
    elif len(names) > max_players:
        match_object.add_error(bowling_models.Error(
            error_code=400,
            error_message='At most {} bowlers can play a match.'.format(
                max_players)))
    for position, name in enumerate(names, 1):
        if not name:
            match_object.add_error(bowling_models.Error(
                error_code=400,
                error_message='The name of player {} is blank.'.format(
                    position)))
        elif len(name) > name_max_length:
            match_object.add_error(bowling_models.Error(
                error_code=400,
                error_message=('The name of player {position} is longer than '
                               '{length} characters.'.format(
                                   position=position,
                                   length=name_max_length))))

    if match_object.errors:
        logging.error('Unable to register the match for: {}'.format(names))
        return match_object

    match_object.bowlers = [bowling_models.Bowler(name) for name in names]
    logging.info('Registered a match for: {}'.format(', '.join(names)))
    return match_object


def bowl_next_ball(match_object, supplier):
    """Bowls the next ball of the match.

    The implementation executes the following:

    1. find the bowler whose turn it is; if the match is over, nothing is
       bowled and None is returned.

    2. ask the supplier how many of the standing pins are knocked down.

    3. record the ball, which scores it and passes the turn on when the
       bowler's frame is complete.

    Returns:
        the recorded ball, or None if the match has been completed
    """
    bowler = match_object.current_bowler
    if bowler is None:
        logging.error('The match has already been played.')
        return None
    frame = bowler.frame
    pins = supplier(bowler.name, frame.pins_remaining)
    ball = match_object.bowl(pins)
    logging.info('{name} bowled {pins} ({outcome}) in frame {frame}, '
                 'total score {total}.'.format(
                     name=bowler.name, pins=ball.pins, outcome=ball.outcome,
                     frame=frame.index + 1, total=bowler.total_score))
    return ball


def play_match(match_object, supplier, on_ball=None):
    """Bowls every remaining ball of the match.

    Args:
        match_object: the match to play
        supplier: callable returning the pins knocked down for a bowler's
            name and the pins standing
        on_ball: optional callable invoked with the match and the ball after
            every single ball

    Returns:
        the completed match
    """
    if match_object.errors or not match_object.bowlers:
        raise exceptions.ScoringException(
            'A match without registered bowlers cannot be played.')
    while not match_object.is_complete:
        ball = bowl_next_ball(match_object, supplier)
        if on_ball is not None:
            on_ball(match_object, ball)
    return match_object


def get_scoreboard(match_object):
    """Gets the scores of all the frames of all bowlers of the match."""
    return serializers.MatchSerializer(match_object).data
