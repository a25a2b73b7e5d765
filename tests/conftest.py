"""Pytest configuration and fixtures."""
# 3rd party
import pytest
import requests

# local
from wcswidth_tables import UnicodeDataClient

BASE_URL = 'https://unicode.test/Public/UNIDATA/'

EAST_ASIAN_WIDTH = """\
# EastAsianWidth-13.0.0.txt
# Date: 2020-01-21, 18:14:00 GMT [KW, LI]
# (c) 2020 Unicode(R), Inc.
#
# East_Asian_Width Property
#
#  Each line contains ';'-separated fields, for example,
#    3000;F           # Zs         IDEOGRAPHIC SPACE
#
0000..001F;N     # Cc    [32] <control-0000>..<control-001F>
0020;Na          # Zs         SPACE
00A1;A           # Po         INVERTED EXCLAMATION MARK
3000;F           # Zs         IDEOGRAPHIC SPACE
1100..115F;W     # Lo    [96] HANGUL CHOSEONG KIYEOK..HANGUL CHOSEONG FILLER
1160..11FF;N     # Lo   [160] HANGUL JUNGSEONG FILLER..HANGUL JONGSEONG SSANGNIEUN
231A..231B;W     # So     [2] WATCH..HOURGLASS
FF01..FF03;F     # Po     [3] FULLWIDTH EXCLAMATION MARK..FULLWIDTH NUMBER SIGN
FF61;H           # Po         HALFWIDTH IDEOGRAPHIC FULL STOP
20000..2A6DD;W   # Lo [42718] CJK UNIFIED IDEOGRAPH-20000..CJK UNIFIED IDEOGRAPH-2A6DD

# EOF
"""

DERIVED_GENERAL_CATEGORY = """\
# DerivedGeneralCategory-15.1.0.txt
# Date: 2023-07-28, 23:34:02 GMT
# (c) 2023 Unicode(R), Inc.
#
# ================================================

# Property:\tGeneral_Category

# ================================================

# General_Category=Unassigned

0378..0379    ; Cn #   [2] <reserved-0378>..<reserved-0379>

# ================================================

# General_Category=Nonspacing_Mark

0300..036F    ; Mn # [112] COMBINING GRAVE ACCENT..COMBINING LATIN SMALL LETTER X
0483..0487    ; Mn #   [5] COMBINING CYRILLIC TITLO..COMBINING CYRILLIC POKRYTIE
0591..05BD    ; Mn #  [45] HEBREW ACCENT ETNAHTA..HEBREW POINT METEG
E0100..E01EF  ; Mn # [240] VARIATION SELECTOR-17..VARIATION SELECTOR-256

# ================================================

# General_Category=Enclosing_Mark

0488..0489    ; Me #   [2] COMBINING CYRILLIC HUNDRED THOUSANDS SIGN..COMBINING CYRILLIC MILLIONS SIGN
20DD..20E0    ; Me #   [4] COMBINING ENCLOSING CIRCLE..COMBINING ENCLOSING CIRCLE BACKSLASH

# ================================================

# General_Category=Spacing_Mark

0903          ; Mc #       DEVANAGARI SIGN VISARGA

# EOF
"""


class CannedAdapter(requests.adapters.BaseAdapter):
    """Transport adapter answering from a mapping of url to document body."""

    def __init__(self, documents):
        super().__init__()
        self.documents = documents
        self.requests = []

    def send(self, request, **kwargs):
        self.requests.append((request, kwargs))
        resp = requests.Response()
        resp.request = request
        resp.url = request.url
        if request.url in self.documents:
            resp.status_code, resp.reason = 200, 'OK'
            resp._content = self.documents[request.url].encode('utf-8')
        else:
            resp.status_code, resp.reason = 404, 'Not Found'
            resp._content = b'Not Found'
        return resp

    def close(self):
        pass


class UnreachableAdapter(requests.adapters.BaseAdapter):
    """Transport adapter failing every request."""

    def send(self, request, **kwargs):
        raise requests.ConnectionError(f'unreachable: {request.url}', request=request)

    def close(self):
        pass


def make_client(adapter, base_url=BASE_URL):
    session = requests.Session()
    session.mount('https://', adapter)
    return UnicodeDataClient(base_url=base_url, session=session)


@pytest.fixture
def east_asian_width():
    return EAST_ASIAN_WIDTH


@pytest.fixture
def derived_general_category():
    return DERIVED_GENERAL_CATEGORY


@pytest.fixture
def documents():
    return {
        BASE_URL + 'EastAsianWidth.txt': EAST_ASIAN_WIDTH,
        BASE_URL + 'extracted/DerivedGeneralCategory.txt': DERIVED_GENERAL_CATEGORY,
    }


@pytest.fixture
def adapter(documents):
    return CannedAdapter(documents)


@pytest.fixture
def client(adapter):
    return make_client(adapter)


@pytest.fixture
def unreachable_client():
    return make_client(UnreachableAdapter())
