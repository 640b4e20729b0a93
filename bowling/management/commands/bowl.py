"""Console bowling: bowl frame after frame and watch the scoreboard."""
import logging

from django.core import exceptions as django_exceptions
from django.core.management.base import BaseCommand, CommandError
from rest_framework.settings import api_settings

from bowling import conf
from bowling import exceptions
from bowling import fields
from bowling import models
from bowling import renderers
from bowling import services
from bowling import suppliers


PLAYERS_PROMPT = 'How many players? '
NAME_PROMPT = 'Enter name of Player {}: '
BOWL_PROMPT = '\n{}, press enter to bowl.'
PLAY_AGAIN_PROMPT = 'Would you like to play again (1: Yes, 2: Quit)? '

BALL_MESSAGES = {
    models.OUTCOME_STRIKE: 'You bowled a strike! Congratulations!',
    models.OUTCOME_SPARE: 'You bowled a spare! Good job!',
    models.OUTCOME_GUTTER: (
        'You bowled a gutter ball... This isn\'t bumper bowling!'),
    models.OUTCOME_OPEN: 'You knocked down {pins} pins.',
}


def read_line(prompt):
    try:
        return input(prompt)
    except EOFError:
        raise CommandError('The console input was closed.')


def ask_integer(prompt, max_input):
    """Prompts until a whole number between 1 and ``max_input`` is entered."""
    while True:
        try:
            value = float(read_line(prompt).strip())
        except ValueError:
            continue
        if 1 <= value <= max_input and value.is_integer():
            return int(value)


def get_renderer(output_format):
    for renderer_class in api_settings.DEFAULT_RENDERER_CLASSES:
        if renderer_class.format == output_format:
            return renderer_class()
    raise CommandError(
        'No scoreboard renderer for format: \'{}\'.'.format(output_format))


class Command(BaseCommand):
    help = ('Simulates games of bowling. Every bowler bowls a frame in turn '
            'and the scoreboard is shown after every ball.')

    def add_arguments(self, parser):
        parser.add_argument(
            '--name', action='append', dest='names',
            help='Name of a bowler; repeat for every bowler.')
        parser.add_argument(
            '--seed', type=int,
            help='Seed of the random pin simulation.')
        parser.add_argument(
            '--pins',
            help='Replay these balls instead of simulating them, e.g. '
                 '"X 7 / 9 -".')
        parser.add_argument(
            '--auto', action='store_true',
            help='Bowl without waiting for enter before every ball.')
        parser.add_argument(
            '--format', dest='output_format', choices=('txt', 'json'),
            help='Scoreboard format.')
        parser.add_argument(
            '--once', action='store_true',
            help='Do not offer to play again.')

    def handle(self, *args, **options):
        self.renderer = get_renderer(
            options['output_format'] or conf.get_setting('SCOREBOARD_FORMAT'))
        interactive = not (options['names'] or options['pins'])
        supplier = self.get_supplier(options)
        scripted = isinstance(supplier, suppliers.ScriptedBallSupplier)

        def on_ball(match_object, ball):
            if scripted:
                supplier.confirm(ball)
            self.show_ball(match_object, ball)

        while True:
            match_object = self.register(options['names'])
            try:
                services.play_match(match_object, supplier, on_ball=on_ball)
                if scripted:
                    supplier.finish()
            except exceptions.ScoringException as e:
                logging.exception('Unable to finish the match.')
                raise CommandError(str(e))
            if self.renderer.format == 'txt':
                self.stdout.write('\n' + renderers.render_result(
                    services.get_scoreboard(match_object)))
            if (options['once'] or not interactive or
                    ask_integer(PLAY_AGAIN_PROMPT, 2) == 2):
                return

    def get_supplier(self, options):
        if options['pins']:
            try:
                return suppliers.ScriptedBallSupplier(
                    fields.parse_marks(options['pins']))
            except django_exceptions.ValidationError as e:
                raise CommandError(' '.join(e.messages))
        seed = options['seed']
        if seed is None:
            seed = conf.get_setting('RANDOM_SEED')
        prompt = None
        if not options['auto'] and self.renderer.format == 'txt':
            prompt = self.prompt_bowler
        return suppliers.RandomBallSupplier(seed=seed, prompt=prompt)

    def register(self, names):
        """Registers a match, asking for the bowlers unless names are given."""
        while True:
            match_object = services.register_match(names or self.ask_names())
            if not match_object.errors:
                return match_object
            messages = [error.error_message for error in match_object.errors]
            if names:
                raise CommandError(' '.join(messages))
            for message in messages:
                self.stderr.write(message)

    def ask_names(self):
        count = ask_integer(PLAYERS_PROMPT, conf.get_setting('MAX_PLAYERS'))
        return [read_line(NAME_PROMPT.format(position))
                for position in range(1, count + 1)]

    def prompt_bowler(self, name):
        read_line(BOWL_PROMPT.format(name))

    def show_ball(self, match_object, ball):
        if self.renderer.format == 'txt':
            self.stdout.write(
                BALL_MESSAGES[ball.outcome].format(pins=ball.pins) + '\n')
        # JSON snapshots are written one per line.
        output = self.renderer.render(services.get_scoreboard(match_object))
        if isinstance(output, bytes):
            output = output.decode(self.renderer.charset or 'utf-8')
        self.stdout.write(output)
