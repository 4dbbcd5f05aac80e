from conslist.linked_list import List
from conslist.logging import ListLogger, _JSONFormatter, init_logging
import json
import logging
import pathlib
import tempfile
import unittest


class TestListLogger(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = ListLogger(logging.getLogger('conslist.tests.logger'))

    def test_format_syntax(self) -> None:
        with self.assertLogs('conslist.tests.logger', level='DEBUG') as cm:
            self.logger.info('{} and {name}', 1, name='x')
        self.assertEqual('1 and x', cm.records[0].getMessage())
        self.assertEqual('INFO', cm.records[0].levelname)

    def test_caller_is_recorded(self) -> None:
        with self.assertLogs('conslist.tests.logger', level='DEBUG') as cm:
            self.logger.warning('hello')
        record = json.loads(_JSONFormatter().format(cm.records[0]))
        self.assertEqual('test_caller_is_recorded', record['function_name'])
        self.assertEqual('test_logging.py', record['file_name'])
        self.assertEqual('WARNING', record['level_name'])
        self.assertIsNone(record['exception'])

    def test_exception_is_formatted(self) -> None:
        with self.assertLogs('conslist.tests.logger', level='DEBUG') as cm:
            try:
                raise ValueError('boom')
            except ValueError:
                self.logger.error('failed', exc_info=True)
        record = json.loads(_JSONFormatter().format(cm.records[0]))
        self.assertIn('ValueError: boom\n', record['exception'])

    def test_disabled_level_is_not_logged(self) -> None:
        with self.assertNoLogs('conslist.tests.logger', level='WARNING'):
            self.logger.debug('quiet')


class TestInitLogging(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger('conslist')
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_counts_are_logged_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = pathlib.Path(directory) / 'conslist.log'
            handler = init_logging(path, logging.DEBUG)
            List.from_iterable([1, 2, 3]).how_many()
            handler.close()
            records = [
                json.loads(line) for line in path.read_text().splitlines()
            ]
        messages = [r['message'] for r in records]
        self.assertIn('built a list of 3 elements', messages)
        self.assertIn('counted 3 elements', messages)
        counted = records[messages.index('counted 3 elements')]
        self.assertEqual('conslist.linked_list', counted['module'])
        self.assertEqual('how_many', counted['function_name'])
        self.assertEqual('DEBUG', counted['level_name'])

    def test_default_level_hides_debug(self) -> None:
        init_logging()
        self.assertFalse(
            logging.getLogger('conslist.linked_list').isEnabledFor(
                logging.DEBUG
            )
        )

    def test_handler_is_replaced(self) -> None:
        first = init_logging()
        second = init_logging()
        handlers = logging.getLogger('conslist').handlers
        self.assertNotIn(first, handlers)
        self.assertIn(second, handlers)
