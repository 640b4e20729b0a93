"""Frames, bowlers and matches.

The scoring engine lives on :class:`Bowler`: every ball is recorded and
scored the moment it is bowled, and the pins are credited backwards to the
strike and spare frames that are still waiting for their bonus balls.
"""
import logging

from bowling import exceptions


NUMBER_OF_FRAMES = 10
FINAL_FRAME = NUMBER_OF_FRAMES - 1
PINS_PER_RACK = 10

OUTCOME_STRIKE = 'strike'
OUTCOME_SPARE = 'spare'
OUTCOME_OPEN = 'open'
OUTCOME_GUTTER = 'gutter'

STATE_AWAITING_FIRST_BALL = 'awaiting_first_ball'
STATE_AWAITING_SECOND_BALL = 'awaiting_second_ball'
STATE_AWAITING_FILL_BALL = 'awaiting_fill_ball'
STATE_FRAME_COMPLETE = 'frame_complete'
STATE_GAME_COMPLETE = 'game_complete'

# Bonus balls owed to a frame of the first nine, by outcome of its last ball.
BONUS_BALLS = {
    OUTCOME_STRIKE: 2,
    OUTCOME_SPARE: 1,
}


class ErrorModel(object):
    """Mixin collecting errors; subclasses set ``self.errors`` in __init__."""

    def add_error(self, error_object):
        """Appends the error to the list of errors."""
        self.errors.append(error_object)


class Error(object):
    """
    An instance of this class encapsulates the error code and the message to be
    returned.

    Attributes:
        error_code: HTTP style error code representation
        error_message: error message that represents the error
    """
    def __init__(self, error_code, error_message):
        self.error_code = error_code
        self.error_message = error_message

    def __eq__(self, other):
        return (self.error_code == other.error_code and
                self.error_message == other.error_message)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Ball(object):
    """A single ball: the pins it knocked down and how it is scored."""

    def __init__(self, pins, outcome):
        self.pins = pins
        self.outcome = outcome

    @property
    def mark(self):
        """Scoreboard mark of the ball."""
        if self.outcome == OUTCOME_STRIKE:
            return 'X'
        if self.outcome == OUTCOME_SPARE:
            return '/'
        if self.outcome == OUTCOME_GUTTER:
            return '-'
        return str(self.pins)

    def __eq__(self, other):
        return self.pins == other.pins and self.outcome == other.outcome

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Frame(object):
    """One of the ten frames of a bowler.

    Attributes:
        index: zero based frame number, 9 being the final frame
        balls: balls bowled in the frame, fill balls included
        score: pins credited to the frame so far, bonus included
        bonus_balls_pending: number of later balls still owed to a strike
            or spare in one of the first nine frames
    """

    def __init__(self, index):
        self.index = index
        self.balls = []
        self.score = 0
        self.bonus_balls_pending = 0

    @property
    def is_final(self):
        return self.index == FINAL_FRAME

    @property
    def is_strike(self):
        return bool(self.balls) and self.balls[0].outcome == OUTCOME_STRIKE

    @property
    def is_spare(self):
        return len(self.balls) > 1 and self.balls[1].outcome == OUTCOME_SPARE

    @property
    def is_complete(self):
        if not self.is_final:
            return self.is_strike or len(self.balls) == 2
        if len(self.balls) < 2:
            return False
        if self.is_strike or self.is_spare:
            return len(self.balls) == 3
        return True

    def _rack(self):
        """Returns the pins standing and whether the rack is untouched.

        The rack is only reset within a frame in the final frame, after a
        ball clears it.
        """
        standing, fresh = PINS_PER_RACK, True
        for ball in self.balls:
            standing -= ball.pins
            fresh = standing == 0
            if fresh:
                standing = PINS_PER_RACK
        return standing, fresh

    @property
    def pins_remaining(self):
        return self._rack()[0]

    def outcome_for(self, pins):
        """Tags the ball knocking down ``pins`` on the current rack."""
        standing, fresh = self._rack()
        if pins == standing:
            return OUTCOME_STRIKE if fresh else OUTCOME_SPARE
        if not pins:
            return OUTCOME_GUTTER
        return OUTCOME_OPEN

    @property
    def state(self):
        if self.is_complete:
            return (STATE_GAME_COMPLETE if self.is_final
                    else STATE_FRAME_COMPLETE)
        if not self.balls:
            return STATE_AWAITING_FIRST_BALL
        if len(self.balls) == 1 and not (self.is_final and self.is_strike):
            return STATE_AWAITING_SECOND_BALL
        return STATE_AWAITING_FILL_BALL

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Bowler(object):
    """Instance of this class represents one participant of a match."""

    def __init__(self, name):
        self._name = name
        self.frames = [Frame(index) for index in range(NUMBER_OF_FRAMES)]
        self.total_score = 0
        self.current_frame = 0

    @property
    def name(self):
        return self._name

    @property
    def frame(self):
        """The frame being bowled."""
        return self.frames[self.current_frame]

    @property
    def balls(self):
        return [ball for frame in self.frames for ball in frame.balls]

    @property
    def frame_scores(self):
        return [frame.score for frame in self.frames]

    @property
    def running_totals(self):
        """Total score up to and including each frame."""
        totals, total = [], 0
        for frame in self.frames:
            total += frame.score
            totals.append(total)
        return totals

    @property
    def state(self):
        return self.frame.state

    @property
    def pins_remaining(self):
        return self.frame.pins_remaining

    @property
    def is_complete(self):
        return self.frames[FINAL_FRAME].is_complete

    def advance_frame(self):
        """Moves on to the next frame once the current one is complete."""
        if self.frame.is_complete and not self.frame.is_final:
            self.current_frame += 1

    def record_ball(self, pins):
        """Records a ball and scores it.

        Args:
            pins: pins knocked down, between 0 and the pins standing

        Returns:
            the recorded ball

        Raises:
            GameCompleteException: the final frame is already complete
            InvalidPinCountException: the pins knocked down are not a whole
                number, are negative or are more than the pins standing
        """
        if self.is_complete:
            raise exceptions.GameCompleteException(self.name)
        self.advance_frame()
        frame = self.frame
        pins_remaining = frame.pins_remaining
        if type(pins) is not int or not 0 <= pins <= pins_remaining:
            raise exceptions.InvalidPinCountException(
                pins, pins_remaining, frame.index)

        ball = Ball(pins, frame.outcome_for(pins))
        frame.balls.append(ball)
        self.apply_score(frame.index, pins, len(frame.balls))
        # Fill balls of the final frame are scored as the frame's own pins.
        if not frame.is_final and frame.is_complete:
            frame.bonus_balls_pending = BONUS_BALLS.get(ball.outcome, 0)
        return ball

    def apply_score(self, frame, pins, ball_number):
        """Credits the pins of a ball.

        The pins count towards ``frame`` itself and, walking backwards, to
        each of the previous two frames that are still owed bonus balls.
        A strike is owed the next two balls and a spare the next one, so
        after a double strike the first ball of the following frame is
        credited three times.

        Args:
            frame: index of the frame the ball was bowled in
            pins: pins knocked down by the ball
            ball_number: 1 based position of the ball within the frame
        """
        self._credit(frame, pins)
        for previous in range(frame - 1, max(frame - 3, -1), -1):
            previous_frame = self.frames[previous]
            if not previous_frame.bonus_balls_pending:
                break
            previous_frame.bonus_balls_pending -= 1
            self._credit(previous, pins)
            logging.debug(
                '{name}: ball {ball} of frame {frame} adds {pins} bonus '
                'pins to frame {previous}.'.format(
                    name=self.name, ball=ball_number, frame=frame + 1,
                    pins=pins, previous=previous + 1))

    def _credit(self, frame, pins):
        self.frames[frame].score += pins
        self.total_score += pins

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Match(ErrorModel):
    """Owns the bowlers of one game and whose turn it is.

    Bowlers take turns frame by frame: every bowler bowls frame 1 before
    anybody bowls frame 2.
    """

    def __init__(self, bowlers=None):
        self.bowlers = list(bowlers or [])
        self.current_frame = 0
        self.errors = []
        self._turn = 0

    @property
    def is_complete(self):
        return bool(self.bowlers) and all(
            bowler.is_complete for bowler in self.bowlers)

    @property
    def current_bowler(self):
        """The bowler whose turn it is, None once the match is over."""
        if not self.bowlers or self.is_complete:
            return None
        return self.bowlers[self._turn]

    def bowl(self, pins):
        """Records a ball for the current bowler and passes the turn on."""
        bowler = self.current_bowler
        if bowler is None:
            raise exceptions.GameCompleteException(
                ', '.join(each.name for each in self.bowlers))
        ball = bowler.record_ball(pins)
        if bowler.frame.is_complete:
            bowler.advance_frame()
            self._advance_turn()
        return ball

    def _advance_turn(self):
        self._turn += 1
        if self._turn == len(self.bowlers):
            self._turn = 0
            if self.current_frame < FINAL_FRAME:
                self.current_frame += 1

    def winners(self):
        """Returns the bowlers sharing the highest total score."""
        if not self.bowlers:
            return []
        best = max(bowler.total_score for bowler in self.bowlers)
        return [bowler for bowler in self.bowlers if bowler.total_score == best]

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)
