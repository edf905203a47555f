import logging
import unittest
from logging.config import dictConfig

from devmatching.core.config import settings
from devmatching.utils.logger import APP_LOGGER, build_logging_config
from devmatching.utils.router_utils import get_router, join_prefix


class TestRouterPrefix(unittest.TestCase):
    def test_join_normalizes_slashes_and_case(self):
        self.assertEqual(join_prefix("/devmatching/api/", "/User/"), "/devmatching/api/user")

    def test_empty_resource_is_rejected(self):
        with self.assertRaises(ValueError):
            join_prefix("/devmatching/api", "/")

    def test_router_lives_under_api_prefix(self):
        router = get_router("auth")

        self.assertEqual(router.prefix, f"{settings.API_PREFIX.rstrip('/')}/auth")
        self.assertEqual(router.tags, ["auth"])

    def test_explicit_tags_win(self):
        self.assertEqual(get_router("user", tags=["users"]).tags, ["users"])


class TestLoggingConfig(unittest.TestCase):
    def test_level_is_applied_to_app_logger(self):
        config = build_logging_config("debug")

        self.assertEqual(config["loggers"][APP_LOGGER]["level"], "DEBUG")
        self.assertFalse(config["disable_existing_loggers"])

    def test_config_is_accepted_by_dict_config(self):
        dictConfig(build_logging_config("warning"))

        logger = logging.getLogger(f"{APP_LOGGER}.services")
        self.assertFalse(logger.isEnabledFor(logging.INFO))
        self.assertTrue(logger.isEnabledFor(logging.WARNING))

        dictConfig(build_logging_config(settings.LOG_LEVEL))


if __name__ == "__main__":
    unittest.main()
