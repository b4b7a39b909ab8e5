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

import math
from rsclib.autosuper import autosuper
from hamcty.entity    import validate_utc_offset
from hamcty.errors    import Override_Format_Error, Malformed_Record_Error
from hamcty.errors    import Invalid_Timezone_Error

class Override (autosuper) :
    """ One kind of annotation appended to an alias in cty.dat
        Docs: https://www.country-files.com/cty-dat-format/
        Derived classes convert the enclosed text into a dict of
        Entity fields to replace, an empty dict if the text doesn't
        have the expected form.
    """
    name   = None
    opener = None
    closer = None

    def fields (self, text, token) :
        raise NotImplementedError
    # end def fields

    def error (self, token, reason = 'invalid value') :
        return Override_Format_Error (self.name, token, reason)
    # end def error

    def zone (self, text, token) :
        # isdigit alone accepts superscripts that int rejects
        if not (text.isascii () and text.isdigit ()) :
            raise self.error (token)
        return int (text)
    # end def zone

    def number (self, text, token) :
        try :
            return float (text)
        except ValueError :
            raise self.error (token)
    # end def number

# end class Override

class CQ_Override (Override) :
    name   = 'CQ zone'
    opener = '('
    closer = ')'

    def fields (self, text, token) :
        return dict (cq_zone = self.zone (text, token))
    # end def fields

# end class CQ_Override

class ITU_Override (Override) :
    name   = 'ITU zone'
    opener = '['
    closer = ']'

    def fields (self, text, token) :
        return dict (itu_zone = self.zone (text, token))
    # end def fields

# end class ITU_Override

class Position_Override (Override) :
    name   = 'position'
    opener = '<'
    closer = '>'

    def fields (self, text, token) :
        if '/' not in text :
            return {}
        lat, lon = text.split ('/', 1)
        return dict \
            ( latitude  = self.number (lat, token)
            , longitude = self.number (lon, token)
            )
    # end def fields

# end class Position_Override

class Continent_Override (Override) :
    name   = 'continent'
    opener = '{'
    closer = '}'

    def fields (self, text, token) :
        return dict (continent = text.strip ())
    # end def fields

# end class Continent_Override

class Timezone_Override (Override) :
    """ Offset in hours, fractional hours occur, e.g. ~-3.5~ """
    name   = 'time zone'
    opener = '~'
    closer = '~'

    def fields (self, text, token) :
        hours = self.number (text, token)
        if not math.isfinite (hours) :
            raise Invalid_Timezone_Error ('UTC offset out of range: %s h' % text)
        return dict (utc_offset = validate_utc_offset (round (hours * 3600)))
    # end def fields

# end class Timezone_Override

# The complete set of annotations, new kinds must be added here
overrides = \
    ( CQ_Override ()
    , ITU_Override ()
    , Position_Override ()
    , Continent_Override ()
    , Timezone_Override ()
    )
by_opener = dict ((o.opener, o) for o in overrides)

def split_token (token) :
    """ Split alias token into exact flag, key, and annotations
    >>> split_token ('=BS7H')
    (True, 'BS7H', '')
    >>> split_token ('XY9(5)[10]{AS}<1.0/2.0>~8~')
    (False, 'XY9', '(5)[10]{AS}<1.0/2.0>~8~')
    >>> split_token ('VK9X<-10.5/-105.7>')
    (False, 'VK9X', '<-10.5/-105.7>')
    """
    is_exact = token.startswith ('=')
    token    = token.lstrip ('=')
    pos      = len (token)
    for n, c in enumerate (token) :
        if c in by_opener :
            pos = n
            break
    return is_exact, token [:pos], token [pos:]
# end def split_token

def scan_overrides (text) :
    """ Yield (override, enclosed text) for each kind of annotation
        found in text. Each kind is searched for independently, only
        its first occurrence counts. Unterminated annotations and
        other text are ignored.
    >>> [(o.name, t) for o, t in scan_overrides ('~-3.5~ [10](5)')]
    [('CQ zone', '5'), ('ITU zone', '10'), ('time zone', '-3.5')]
    >>> [(o.name, t) for o, t in scan_overrides ('(5[10]x')]
    [('ITU zone', '10')]
    """
    for ovr in overrides :
        start = text.find (ovr.opener)
        if start < 0 :
            continue
        end = text.find (ovr.closer, start + 1)
        if end < 0 :
            continue
        yield ovr, text [start + 1:end]
# end def scan_overrides

def decode_alias (token, base) :
    """ Decode one alias token relative to the base entity.
        Returns the lookup key and a new entity, base is not modified.
    """
    is_exact, key, text = split_token (token)
    if not key :
        raise Malformed_Record_Error ('Empty alias in %r' % token)
    changes = dict (is_exact = is_exact)
    for ovr, t in scan_overrides (text) :
        changes.update (ovr.fields (t, token))
    return key, base.copy (**changes)
# end def decode_alias

__all__ = ['overrides', 'decode_alias', 'split_token', 'scan_overrides']
