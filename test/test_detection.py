#!/usr/bin/env python3
import sys
import os
import unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from relay.detection import Level, normalize_level, get_level_emoji


class TestNormalizeLevel(unittest.TestCase):
    def test_case_insensitive(self):
        for raw in ['warn', 'WARN', 'Warn', 'wArN']:
            self.assertEqual(normalize_level(raw), Level.WARN, f"falhou para {raw!r}")

    def test_known_levels(self):
        self.assertEqual(normalize_level('debug'), Level.DEBUG)
        self.assertEqual(normalize_level('info'), Level.INFO)
        self.assertEqual(normalize_level('error'), Level.ERROR)

    def test_legacy_aliases(self):
        self.assertEqual(normalize_level('deb'), Level.DEBUG)
        self.assertEqual(normalize_level('INF'), Level.INFO)
        self.assertEqual(normalize_level('war'), Level.WARN)
        self.assertEqual(normalize_level('Err'), Level.ERROR)

    def test_missing_or_unknown_maps_to_unknown(self):
        for raw in [None, '', 'fatal', 'critical', 42, ['warn'], {'level': 'info'}]:
            self.assertEqual(normalize_level(raw), Level.UNKNOWN, f"falhou para {raw!r}")

    def test_exact_match_only(self):
        # sem trim e sem nomes do logging do Python
        for raw in [' warn ', '\twarn\n', 'warning', 'INFO ', 'WARNINGS']:
            self.assertEqual(normalize_level(raw), Level.UNKNOWN, f"falhou para {raw!r}")

    def test_idempotent(self):
        for raw in ['debug', 'INFO', 'Warn', 'err', 'whatever', None]:
            once = normalize_level(raw)
            self.assertEqual(normalize_level(once), once)
            self.assertEqual(normalize_level(once.value), once)


class TestLevelEmoji(unittest.TestCase):
    def test_emoji_per_level(self):
        self.assertEqual(get_level_emoji('debug'), '🔍')
        self.assertEqual(get_level_emoji('info'), '💡')
        self.assertEqual(get_level_emoji('warn'), '⚡')
        self.assertEqual(get_level_emoji('error'), '🌋')

    def test_unknown_emoji(self):
        self.assertEqual(get_level_emoji(None), '❔')
        self.assertEqual(get_level_emoji('nope'), '❔')
        self.assertEqual(get_level_emoji(Level.UNKNOWN), '❔')


if __name__ == '__main__':
    unittest.main()
