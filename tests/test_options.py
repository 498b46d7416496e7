import logging

import pytest
from pydantic import ValidationError

from models import ViewOptions, get_default_options, set_default_options
from utils import describe_view, is_live_view, setup_logging
from views import SequenceView


class TestViewOptions:
    """Test option validation and inheritance"""

    def test_defaults(self):
        options = ViewOptions()
        assert options.fail_fast is True
        assert options.repr_limit == 10
        assert options.log_level == "WARNING"

    def test_log_level_normalized(self):
        assert ViewOptions(log_level=" debug ").log_level == "DEBUG"
        assert ViewOptions(log_level="info").numeric_log_level() == logging.INFO

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            ViewOptions(log_level="LOUD")
        with pytest.raises(ValidationError):
            ViewOptions(repr_limit=-1)
        with pytest.raises(ValidationError):
            ViewOptions(unknown_flag=True)

    def test_options_are_frozen(self):
        options = ViewOptions()
        with pytest.raises(ValidationError):
            options.fail_fast = False

    def test_set_default_options(self):
        """Test that new root views pick up module defaults"""
        set_default_options(repr_limit=1)
        assert get_default_options().repr_limit == 1
        assert get_default_options().fail_fast is True
        assert SequenceView([1, 2]).options.repr_limit == 1

        with pytest.raises(ValidationError):
            set_default_options(repr_limit=5000)
        assert get_default_options().repr_limit == 1

    def test_derived_views_inherit_options(self, names):
        options = ViewOptions(fail_fast=False, repr_limit=3)
        view = SequenceView(names, options).filter(lambda s: True).map(len)
        assert view.options is options


class TestUtils:
    """Test view inspection helpers and logging setup"""

    def test_is_live_view(self, names):
        view = SequenceView(names).filter(lambda s: "a" in s)
        assert is_live_view(view)
        assert not is_live_view(view.to_list())

    def test_describe_view(self, names):
        view = SequenceView(names).filter(lambda s: "a" in s).map(len)
        assert describe_view(view) == ["source", "filter", "map"]
        assert describe_view(SequenceView(names)) == ["source"]

    def test_describe_rejects_non_views(self, names):
        with pytest.raises(TypeError):
            describe_view(names)

    def test_setup_logging_level(self):
        logger = setup_logging(ViewOptions(log_level="DEBUG"))
        assert logger.name == "lazy_views"
        assert logger.level == logging.DEBUG

    def test_rejected_add_is_logged(self, names, caplog):
        view = SequenceView(names).filter(lambda s: "a" in s)
        with caplog.at_level(logging.WARNING, logger="lazy_views"):
            with pytest.raises(ValueError):
                view.add("Elvis")
        assert "Rejected 'Elvis'" in caplog.text
