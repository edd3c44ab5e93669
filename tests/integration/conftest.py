import pytest

from xml2json import XmlToJson


@pytest.fixture
def round_trip():
    def _round_trip(xml, converter=None):
        converter = converter or XmlToJson()
        return converter.prepare_for_encoder(converter.convert(xml))

    return _round_trip
