from densityplot.core.errors import (
    ConfigError,
    DensityPlotError,
    EmptyInputError,
    InvalidArgumentError,
    SampleLoadError,
)


class TestErrorTaxonomy:
    def test_all_errors_share_a_base(self):
        for cls in (EmptyInputError, InvalidArgumentError, SampleLoadError, ConfigError):
            assert issubclass(cls, DensityPlotError)

    def test_default_codes(self):
        assert EmptyInputError().code == "empty_input"
        assert InvalidArgumentError("x").code == "invalid_argument"
        assert SampleLoadError("x").code == "sample_load_error"
        assert ConfigError("x").code == "config_error"

    def test_str_is_message(self):
        assert str(InvalidArgumentError("bins must be positive")) == "bins must be positive"

    def test_sample_load_error_location(self):
        err = SampleLoadError("Not a number: 'x'", file="data.txt", line=3)

        assert str(err) == "data.txt:3: Not a number: 'x'"

    def test_sample_load_error_without_line(self):
        assert str(SampleLoadError("bad", file="data.json")) == "data.json: bad"
