# Copyright (C) 2021-26 Dr. Ralf Schlatterbeck Open Source Consulting.
# Reichergasse 131, A-3411 Weidling.
# Web: http://www.runtux.com Email: office@runtux.com
# ****************************************************************************
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are
# met:
#
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS
# IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED
# TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A
# PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
# SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED
# TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR
# PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS
# SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
# ****************************************************************************

from collections import namedtuple
from datetime    import timedelta, timezone
from hamcty.errors import Invalid_Timezone_Error

def validate_utc_offset (seconds) :
    """ Return seconds if it is a valid fixed UTC offset
    >>> validate_utc_offset (8 * 3600)
    28800
    >>> validate_utc_offset (-86399)
    -86399
    >>> validate_utc_offset (86400)
    Traceback (most recent call last):
    ...
    hamcty.errors.Invalid_Timezone_Error: UTC offset out of range: 86400 s
    """
    if not -86400 < seconds < 86400 :
        raise Invalid_Timezone_Error ('UTC offset out of range: %s s' % seconds)
    return seconds
# end def validate_utc_offset

_fields = \
    ( 'name', 'cq_zone', 'itu_zone', 'continent', 'latitude', 'longitude'
    , 'utc_offset', 'primary_prefix', 'waedc', 'is_exact'
    )

class Entity (namedtuple ('Entity', _fields)) :
    """ One DXCC entity (or part thereof) as seen under one key of
        the table. The utc_offset is in seconds east of UTC.
    >>> e = Entity ('Fed. Rep. of Germany', 14, 28, 'EU', 51.0, -10.0
    ...            , 0, 'DL', False, False)
    >>> e # doctest: +NORMALIZE_WHITESPACE
    DL     Fed. Rep. of Germany                EU CQ: 14 ITU: 28 51.00/-10.00 UTC
    >>> e.copy (cq_zone = 15).cq_zone
    15
    >>> e.cq_zone
    14
    """
    __slots__ = ()

    def copy (self, **fields) :
        return self._replace (**fields)
    # end def copy

    @property
    def timezone (self) :
        return timezone (timedelta (seconds = self.utc_offset))
    # end def timezone

    def __str__ (self) :
        r = []
        r.append ('%-6s' % self.primary_prefix)
        r.append ('%-35s' % self.name)
        r.append (self.continent)
        r.append ('CQ: %s'  % self.cq_zone)
        r.append ('ITU: %s' % self.itu_zone)
        r.append ('%.2f/%.2f' % (self.latitude, self.longitude))
        r.append (self.timezone.tzname (None))
        if self.waedc :
            r.append ('WAEDC')
        if self.is_exact :
            r.append ('exact')
        return ' '.join (r)
    # end def __str__
    __repr__ = __str__

# end class Entity

__all__ = ['Entity', 'validate_utc_offset']
