"""Shared log lines for decoder and filter tests."""
from __future__ import annotations

GOOD_LINE = '[01/Aug/1995:00:54:59 -0400] "GET /images/opf-logo.gif HTTP/1.0" 200 32511'
CLF_LINE = (
    'in24.inetnebr.com - - [01/Aug/1995:00:00:01 -0400] '
    '"GET /shuttle/missions/sts-68/news/sts-68-mcc-05.txt HTTP/1.0" 200 1839'
)
DASH_SIZE_LINE = '[01/Aug/1995:00:55:02 -0400] "GET /images/ HTTP/1.0" 304 -'
POST_LINE = '[01/Aug/1995:00:55:03 -0400] "POST /postFile HTTP/1.0" 201 3255125'
FORBIDDEN_LINE = '[01/Aug/1995:00:55:04 -0400] "GET /images/ksclogosmall.gif HTTP/1.0" 403 298'
