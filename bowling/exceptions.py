"""Encapsulates all exceptions raised by the bowling simulator."""


class ScoringException(Exception):
    """Base class for all scoring exceptions."""


class InvalidPinCountException(ScoringException):
    """The pins knocked down are negative or exceed the pins standing.

    The ball-outcome supplier is responsible for never handing such a value
    to the engine, so this is a defect in the caller and is never recovered
    from by the engine itself.
    """
    def __init__(self, pins, pins_remaining, frame):
        super(InvalidPinCountException, self).__init__(
            ('{pins} pins cannot be knocked down with {remaining} pins '
             'standing in frame: {frame}.'.format(
                 pins=pins, remaining=pins_remaining, frame=frame + 1)))


class GameCompleteException(ScoringException):
    def __init__(self, name):
        super(GameCompleteException, self).__init__(
            '\'{}\' has already completed the game.'.format(name))


class ScriptExhaustedException(ScoringException):
    def __init__(self, name, count):
        super(ScriptExhaustedException, self).__init__(
            ('The scripted balls ran out after {count} balls while '
             'waiting for: \'{name}\'.'.format(count=count, name=name)))


class ScriptMismatchException(ScoringException):
    def __init__(self, mark, position, ball_mark):
        super(ScriptMismatchException, self).__init__(
            ('Scripted ball {position} \'{mark}\' was bowled as '
             '\'{ball_mark}\'.'.format(
                 position=position, mark=mark, ball_mark=ball_mark)))


class ScriptNotFinishedException(ScoringException):
    def __init__(self, count):
        super(ScriptNotFinishedException, self).__init__(
            ('{} scripted balls were left over after the game '
             'ended.'.format(count)))
