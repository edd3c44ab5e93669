import xml.etree.ElementTree as ET

import pytest

from xml2json import XmlToJson


@pytest.fixture
def converter():
    return XmlToJson()


@pytest.fixture
def nested_xml():
    return '<a><b href="#self">simple</b><b><c class="my_class"><d>D</d><d>1</d></c></b></a>'


@pytest.fixture
def parse_with_comments():
    def _parse(xml):
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
        return ET.fromstring(xml, parser=parser)

    return _parse
