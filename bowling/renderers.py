"""Renderers turning a serialized match into console output."""
from rest_framework import renderers

from bowling import models


NAME_WIDTH = 14
FRAME_WIDTH = 5
FINAL_FRAME_WIDTH = 7


def _marks(frame, slots):
    marks = list(frame['marks']) + [' '] * (slots - len(frame['marks']))
    return ' {} |'.format(' '.join(marks))


def _score(frame, width):
    score = '' if frame['score'] is None else frame['score']
    return '{:>{width}} |'.format(score, width=width - 1)


class ScoreboardTextRenderer(renderers.BaseRenderer):
    """Renders the scoreboard grid of a serialized match.

    Every bowler gets a row of ball marks followed by the total score and a
    row of frame scores. The final frame has room for its fill balls.
    """
    media_type = 'text/plain'
    format = 'txt'
    charset = 'utf-8'

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return ''
        if 'errors' in data:
            return '\n'.join(error['error_message'] for error in data['errors'])

        header = '{:<{width}}|'.format('Name', width=NAME_WIDTH)
        for frame in range(1, models.NUMBER_OF_FRAMES):
            header += '{:^{width}}|'.format(frame, width=FRAME_WIDTH)
        header += '{:^{width}}| Total'.format(
            models.NUMBER_OF_FRAMES, width=FINAL_FRAME_WIDTH)

        lines = [header]
        for bowler in data['bowlers']:
            lines.append('-' * len(header))
            marks = '{:<{width}}|'.format(
                bowler['name'][:NAME_WIDTH], width=NAME_WIDTH)
            scores = ' ' * NAME_WIDTH + '|'
            for frame in bowler['frames']:
                if frame['frame'] == models.NUMBER_OF_FRAMES:
                    marks += _marks(frame, 3)
                    scores += _score(frame, FINAL_FRAME_WIDTH)
                else:
                    marks += _marks(frame, 2)
                    scores += _score(frame, FRAME_WIDTH)
            marks += ' {:>5}'.format(bowler['total_score'])
            lines.extend([marks, scores])
        return '\n'.join(lines) + '\n'


def render_result(data):
    """Announces the winner of a serialized, completed match."""
    winners = data.get('winners') or []
    if not winners:
        return ''
    if len(winners) > 1:
        return 'It was a tie!'
    return '{} won the game!'.format(winners[0])
