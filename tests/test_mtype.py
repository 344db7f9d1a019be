import pytest

from crawlkit.base import Analyzer, Downloader, Pipeline
from crawlkit.maddr import new_addr
from crawlkit.mid import gen_mid
from crawlkit.mtype import (
    ModuleType,
    check_type,
    get_letter,
    get_type,
    legal_type,
    letter_to_type,
    type_to_letter,
)
from crawlkit.sn import SNGenerator

LEGAL_TYPES = [ModuleType.DOWNLOADER, ModuleType.ANALYZER, ModuleType.PIPELINE]
ILLEGAL_TYPES = ["OTHER_MODULE_TYPE"]
LEGAL_IPS = ["192.0.2.1", "2001:db8::68"]
LETTER_TYPES = [
    ("D", ModuleType.DOWNLOADER),
    ("A", ModuleType.ANALYZER),
    ("P", ModuleType.PIPELINE),
]
ILLEGAL_MIDS = [
    "D", "DZ", "D1|", "D1|127.0.0.1:-1", "D1|127.0.0.1:", "D1|127.0.0.1",
    "D1|127.0.0.", "D1|127", "D1|127.0.0.0.1:8080", "DZ|127.0.0.1:8080",
    "A", "AZ", "A1|", "A1|127.0.0.1:-1", "A1|127.0.0.1:", "A1|127.0.0.1",
    "A1|127.0.0.", "A1|127", "A1|127.0.0.0.1:8080", "AZ|127.0.0.1:8080",
    "P", "PZ", "P1|", "P1|127.0.0.1:-1", "P1|127.0.0.1:", "P1|127.0.0.1",
    "P1|127.0.0.", "P1|127", "P1|127.0.0.0.1:8080", "PZ|127.0.0.1:8080",
    "M1|127.0.0.1:8080",
]


class _FakeModule:
    def __init__(self, mid):
        self._mid = mid
        self._score = 0

    @property
    def id(self):
        return self._mid

    @property
    def addr(self):
        return ""

    @property
    def score(self):
        return self._score

    @score.setter
    def score(self, value):
        self._score = value

    @property
    def score_calculator(self):
        return None

    @property
    def called_count(self):
        return 10

    @property
    def accepted_count(self):
        return 8

    @property
    def completed_count(self):
        return 6

    @property
    def handling_number(self):
        return 2


class _FakeDownloader(_FakeModule, Downloader):
    def download(self, req):
        return None


class _FakeAnalyzer(_FakeModule, Analyzer):
    @property
    def resp_parsers(self):
        return []

    def analyze(self, resp):
        return [], []


class _FakePipeline(_FakeModule, Pipeline):
    _fail_fast = False

    @property
    def item_processors(self):
        return []

    def send(self, item):
        return []

    @property
    def fail_fast(self):
        return self._fail_fast

    @fail_fast.setter
    def fail_fast(self, value):
        self._fail_fast = value


FAKE_MODULES = {
    ModuleType.DOWNLOADER: _FakeDownloader("D0"),
    ModuleType.ANALYZER: _FakeAnalyzer("A1"),
    ModuleType.PIPELINE: _FakePipeline("P2"),
}


def test_check_type_invalid_inputs():
    assert check_type("", FAKE_MODULES[ModuleType.DOWNLOADER]) is False
    assert check_type(ModuleType.DOWNLOADER, None) is False


@pytest.mark.parametrize("mt", LEGAL_TYPES)
def test_check_type_matrix(mt):
    for other_type, module in FAKE_MODULES.items():
        assert check_type(mt, module) is (other_type is mt)


def test_check_type_accepts_plain_string():
    assert check_type("pipeline", FAKE_MODULES[ModuleType.PIPELINE]) is True


def test_legal_type():
    for mt in LEGAL_TYPES:
        assert legal_type(mt) is True
        assert legal_type(mt.value) is True
    for mt in ILLEGAL_TYPES:
        assert legal_type(mt) is False


def test_get_type_for_legal_mids():
    gen = SNGenerator(1, 0)
    for mt in LEGAL_TYPES:
        for ip in LEGAL_IPS:
            mid = gen_mid(mt, gen.get(), new_addr("http", ip, 8080))
            assert get_type(mid) is mt


@pytest.mark.parametrize("mid", ILLEGAL_MIDS)
def test_get_type_for_illegal_mids(mid):
    assert get_type(mid) is None


def test_get_letter():
    for letter, mt in LETTER_TYPES:
        assert get_letter(mt) == letter
    for mt in ILLEGAL_TYPES:
        assert get_letter(mt) is None


def test_type_to_letter():
    for letter, mt in LETTER_TYPES:
        assert type_to_letter(mt) == letter
        assert type_to_letter(mt) == mt.value[0].upper()
    for mt in ILLEGAL_TYPES:
        assert type_to_letter(mt) is None


@pytest.mark.parametrize(
    "letter, expected",
    [("D", ModuleType.DOWNLOADER), ("A", ModuleType.ANALYZER),
     ("P", ModuleType.PIPELINE), ("M", None)],
)
def test_letter_to_type(letter, expected):
    assert letter_to_type(letter) is expected