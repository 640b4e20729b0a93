"""Unit tests for the bowl management command."""
from unittest import mock

import io
import json

import pytest

from django import test
from django.core.management import call_command
from django.core.management.base import CommandError


PERFECT_GAME = ' '.join(['X'] * 12)


class BowlCommandTest(test.SimpleTestCase):

    def call(self, *args):
        out, err = io.StringIO(), io.StringIO()
        call_command('bowl', *args, stdout=out, stderr=err)
        return out.getvalue(), err.getvalue()

    def test_scripted_game(self):
        with mock.patch('builtins.input') as input_mock:
            out, _ = self.call('--name', 'Alice', '--pins', PERFECT_GAME)
            assert input_mock.call_count == 0
        assert out.count('You bowled a strike! Congratulations!') == 12
        assert out.count('| Total') == 12
        assert '   300' in out
        assert out.rstrip().endswith('Alice won the game!')

    def test_scripted_tie(self):
        out, _ = self.call('--name', 'Alice', '--name', 'Bob',
                           '--pins', ' '.join(['-'] * 40))
        assert out.count(
            'You bowled a gutter ball... This isn\'t bumper bowling!') == 40
        assert out.rstrip().endswith('It was a tie!')

    def test_ball_messages(self):
        out, _ = self.call('--name', 'Alice', '--once',
                           '--pins', '3 / 4 2' + ' 0' * 16)
        assert 'You knocked down 3 pins.' in out
        assert 'You bowled a spare! Good job!' in out
        assert 'You knocked down 2 pins.' in out

    def test_json_scoreboard(self):
        out, _ = self.call('--name', 'Alice', '--format', 'json',
                           '--pins', PERFECT_GAME)
        assert 'You bowled' not in out
        assert 'won the game' not in out
        snapshots = [json.loads(line) for line in out.splitlines()]
        assert len(snapshots) == 12
        assert snapshots[0]['bowlers'][0]['total_score'] == 10
        assert snapshots[-1]['bowlers'][0]['total_score'] == 300
        assert snapshots[-1]['winners'] == ['Alice']

    def test_invalid_script(self):
        with pytest.raises(CommandError,
                           match='The ball mark \'Q\' is invalid.'):
            self.call('--name', 'Alice', '--pins', 'X Q')

    def test_script_too_short(self):
        with pytest.raises(CommandError,
                           match='The scripted balls ran out after 1 balls'):
            self.call('--name', 'Alice', '--pins', 'X')

    def test_script_knocks_down_too_many_pins(self):
        with pytest.raises(
                CommandError,
                match=('8 pins cannot be knocked down with 3 pins '
                       'standing in frame: 1.')):
            self.call('--name', 'Alice', '--pins', '7 8')

    def test_script_strike_bowled_as_spare(self):
        with pytest.raises(
                CommandError,
                match='Scripted ball 2 \'X\' was bowled as \'/\'.'):
            self.call('--name', 'Al', '--pins',
                      '5 X / 3 ' + '0 ' * 16 + '9 9 9')

    def test_script_spare_on_a_fresh_rack(self):
        with pytest.raises(
                CommandError,
                match='Scripted ball 1 \'/\' was bowled as \'X\'.'):
            self.call('--name', 'Alice', '--pins', '/ 3 4' + ' 0' * 16)

    def test_script_left_over_balls(self):
        with pytest.raises(
                CommandError,
                match='3 scripted balls were left over after the game '
                      'ended.'):
            self.call('--name', 'Alice', '--pins', '0 ' * 20 + '9 9 9')

    def test_script_digit_clearing_the_rack(self):
        out, _ = self.call('--name', 'Alice', '--pins', '7 3' + ' 0' * 18)
        assert 'You bowled a spare! Good job!' in out
        assert out.rstrip().endswith('Alice won the game!')

    def test_blank_name(self):
        with pytest.raises(CommandError,
                           match='The name of player 2 is blank.'):
            self.call('--name', 'Alice', '--name', ' ', '--pins', 'X')

    def test_random_game_waits_for_enter(self):
        with mock.patch('builtins.input', return_value='') as input_mock:
            out, _ = self.call('--name', 'Alice', '--seed', '5')
        prompts = input_mock.call_args_list
        assert 11 <= len(prompts) <= 21
        assert all(prompt == mock.call('\nAlice, press enter to bowl.')
                   for prompt in prompts)
        assert out.rstrip().endswith('Alice won the game!')

    def test_interactive_game(self):
        answers = ['two', '0', '1.5', '1', 'Alice', '2']
        with mock.patch('builtins.input', side_effect=answers) as input_mock:
            out, _ = self.call('--auto', '--seed', '3')
        assert input_mock.call_args_list == [
            mock.call('How many players? '),
            mock.call('How many players? '),
            mock.call('How many players? '),
            mock.call('How many players? '),
            mock.call('Enter name of Player 1: '),
            mock.call('Would you like to play again (1: Yes, 2: Quit)? ')]
        assert out.rstrip().endswith('Alice won the game!')

    def test_play_again(self):
        answers = ['1', 'Alice', '1', '1', 'Bob', '2']
        with mock.patch('builtins.input', side_effect=answers):
            out, _ = self.call('--auto', '--seed', '3')
        assert 'Alice won the game!' in out
        assert out.rstrip().endswith('Bob won the game!')

    def test_play_once(self):
        with mock.patch('builtins.input',
                        side_effect=['1', 'Alice']) as input_mock:
            self.call('--auto', '--once')
        assert input_mock.call_count == 2

    def test_interactive_blank_name_is_asked_again(self):
        answers = ['1', '  ', '1', 'Alice', '2']
        with mock.patch('builtins.input', side_effect=answers):
            out, err = self.call('--auto')
        assert 'The name of player 1 is blank.' in err
        assert out.rstrip().endswith('Alice won the game!')

    def test_closed_input(self):
        with mock.patch('builtins.input', side_effect=EOFError):
            with pytest.raises(CommandError,
                               match='The console input was closed.'):
                self.call()
