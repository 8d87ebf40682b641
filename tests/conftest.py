"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
provides a small indexed Perl document shared by feature tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from perlscope.index.kinds import SymbolKind  # noqa: E402
from perlscope.index.models import Element, PerlDocument  # noqa: E402

DOC_URI = "file:///work/lib/My/Shape.pm"

SHAPE_SOURCE = """\
package My::Shape;
use parent 'My::Base';
use List::Util qw(max);

sub new {
    my ($class, %args) = @_;
    my $self = bless {}, $class;
    return $self;
}
sub area {
    my ($self, $scale) = @_;
    my $x = 1;
    my $circle = My::Circle->new();
    $circle->radius;
    my $x = 2;
    return max($x, $self->SUPER::area());
}
"""


@pytest.fixture
def shape_doc() -> PerlDocument:
    """Document model for SHAPE_SOURCE as the indexer would publish it."""
    elements = [
        Element(name="My::Shape", kind=SymbolKind.PACKAGE, package="My::Shape", line=0, uri=DOC_URI),
        Element(
            name="My::Shape::new",
            kind=SymbolKind.LOCAL_SUB,
            package="My::Shape",
            line=4,
            uri=DOC_URI,
            signature=("$class", "%args"),
        ),
        Element(
            name="My::Shape::area",
            kind=SymbolKind.LOCAL_METHOD,
            package="My::Shape",
            line=9,
            uri=DOC_URI,
            signature=("$self", "$scale"),
        ),
        Element(name="$x", kind=SymbolKind.LOCAL_VAR, package="My::Shape", line=11, uri=DOC_URI),
        Element(name="$x", kind=SymbolKind.LOCAL_VAR, package="My::Shape", line=14, uri=DOC_URI),
        Element(name="$self", kind=SymbolKind.LOCAL_VAR, package="My::Shape", line=10, uri=DOC_URI),
        Element(
            name="max",
            kind=SymbolKind.IMPORTED_SUB,
            type_detail="List::Util::max",
            package="List::Util",
            line=2,
            uri="file:///usr/lib/perl5/List/Util.pm",
        ),
        Element(
            name="My::Base::area",
            kind=SymbolKind.INHERITED,
            package="My::Base",
            uri="file:///work/lib/My/Base.pm",
        ),
    ]
    canonical = {
        "$circle": Element(
            name="$circle",
            kind=SymbolKind.CANONICAL,
            type_detail="My::Circle",
            package="My::Shape",
            line=12,
            uri=DOC_URI,
        ),
    }
    return PerlDocument.from_elements(
        DOC_URI, elements, canonical=canonical, parents={"My::Shape": "My::Base"}
    )


@pytest.fixture
def shape_source() -> str:
    return SHAPE_SOURCE


@pytest.fixture
def doc_uri() -> str:
    return DOC_URI
