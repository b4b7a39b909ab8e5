#!/usr/bin/python3
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

import io
import os
import sys
import logging
from argparse         import ArgumentParser
from collections      import namedtuple
from types            import MappingProxyType
from rsclib.autosuper import autosuper
from hamcty.entity    import Entity
from hamcty.override  import decode_alias
from hamcty.errors    import CTY_Error, CTY_IO_Error
from hamcty.errors    import Malformed_Record_Error, Field_Format_Error

log = logging.getLogger (__name__)

# Sources
# Big CTY list and format description:
# https://www.country-files.com/big-cty-06-september-2021/
# https://www.country-files.com/cty-dat-format/

def zone (value) :
    if not (value.isascii () and value.isdigit ()) :
        raise ValueError (value)
    return int (value)
# end def zone

# Fields of a primary record in file order with their converters.
# The time zone field is not evaluated, offsets of the primary record
# are always 0, real offsets come from ~n~ alias annotations.
record_fields = \
    ( ('name',       str)
    , ('cq_zone',    zone)
    , ('itu_zone',   zone)
    , ('continent',  str)
    , ('latitude',   float)
    , ('longitude',  float)
    , ('utc_offset', None)
    , ('prefix',     str)
    )

class Parse_State (namedtuple ('Parse_State', 'base lineno')) :
    """ Entity of the last primary record and the current line number.
        A new state is returned for each parsed line.
    """
    __slots__ = ()
# end class Parse_State

def parse_record (fields) :
    """ Parse the colon-separated fields of a primary record
    >>> f = 'Fed. Rep. of Germany: 14: 28: EU: 51.00: -10.00: -1.0: *DL:'
    >>> e = parse_record ([x.strip () for x in f.split (':')])
    >>> (e.name, e.cq_zone, e.itu_zone, e.primary_prefix, e.waedc)
    ('Fed. Rep. of Germany', 14, 28, 'DL', True)
    >>> e.utc_offset, e.is_exact
    (0, False)
    """
    if len (fields) < len (record_fields) :
        raise Malformed_Record_Error \
            ( 'Expected %d fields, got %d'
            % (len (record_fields), len (fields))
            )
    d = {}
    for (name, cvt), value in zip (record_fields, fields) :
        if cvt is None :
            continue
        try :
            d [name] = cvt (value)
        except ValueError :
            raise Field_Format_Error (name, value)
    pfx = d.pop ('prefix')
    d ['primary_prefix'] = pfx.lstrip ('*')
    d ['waedc']          = pfx.startswith ('*')
    d ['utc_offset']     = 0
    d ['is_exact']       = False
    if not d ['primary_prefix'] :
        raise Malformed_Record_Error ('Empty prefix')
    return Entity (**d)
# end def parse_record

def parse_line (entities, state, line) :
    """ Parse one line of cty.dat into entities, return the new state.
        Lines with more than two colon-separated fields are primary
        records, all others are alias lines for the last record.
    """
    state = state._replace (lineno = state.lineno + 1)
    line  = line.strip ()
    if not line or line.startswith ('#') :
        return state
    try :
        fields = [x.strip () for x in line.split (':')]
        if len (fields) > 2 :
            base = parse_record (fields)
            entities [base.primary_prefix] = base
            return state._replace (base = base)
        for token in line.rstrip (';').split (',') :
            token = token.strip ()
            if not token :
                continue
            if state.base is None :
                raise Malformed_Record_Error \
                    ('Alias %r before first record' % token)
            key, entity = decode_alias (token, state.base)
            entities [key] = entity
    except CTY_Error as err :
        err.lineno = state.lineno
        err.line   = line
        raise
    return state
# end def parse_line

class CTY (autosuper) :
    """ Table of cty.dat entries indexed by prefix or exact callsign.
        Read-only once constructed, use from_file or from_lines.
    """

    encoding = 'latin-1'

    def __init__ (self, entities, countries = None) :
        self.__super.__init__ ()
        self.entities  = MappingProxyType (dict (entities))
        self.prf_max   = 0
        if countries is None :
            countries = {}
            for key, e in self.entities.items () :
                if not e.is_exact and key == e.primary_prefix :
                    countries.setdefault (e.name, e)
        self.countries = MappingProxyType (dict (countries))
        for key in self.entities :
            if len (key) > self.prf_max :
                self.prf_max = len (key)
    # end def __init__

    @classmethod
    def from_lines (cls, lines) :
        entities  = {}
        countries = {}
        state     = Parse_State (None, 0)
        for line in lines :
            state = parse_line (entities, state, line)
            base  = state.base
            if base is not None and base.name not in countries :
                countries [base.name] = base
        return cls (entities, countries)
    # end def from_lines

    @classmethod
    def from_file (cls, filename) :
        log.debug ('Loading %s', filename)
        try :
            with io.open (filename, 'r', encoding = cls.encoding) as f :
                cty = cls.from_lines (f)
        except (IOError, OSError) as err :
            raise CTY_IO_Error ('%s: %s' % (filename, err)) from err
        log.debug \
            ( '%s: %d keys for %d entities'
            , filename, len (cty), len (cty.countries)
            )
        return cty
    # end def from_file

    def callsign_lookup (self, callsign) :
        """ Return the best matching entity or None.
            An exact entry for the whole callsign wins, otherwise the
            longest key that is a prefix of callsign is used (this
            includes exact entries).
        """
        e = self.entities.get (callsign)
        if e is not None and e.is_exact :
            return e
        for n in reversed (range (min (self.prf_max, len (callsign)))) :
            pfx = callsign [:n+1]
            if pfx in self.entities :
                return self.entities [pfx]
    # end def callsign_lookup
    lookup = callsign_lookup

    def __contains__ (self, key) :
        return key in self.entities
    # end def __contains__

    def __getitem__ (self, key) :
        return self.entities [key]
    # end def __getitem__

    def __len__ (self) :
        return len (self.entities)
    # end def __len__

# end class CTY

def load (path) :
    return CTY.from_file (path)
# end def load

def lookup (table, callsign) :
    return table.callsign_lookup (callsign)
# end def lookup

def main (argv = None) :
    cmd = ArgumentParser ()
    cmd.add_argument \
        ( "callsign"
        , help    = "Callsign to look up"
        , nargs   = '*'
        )
    cmd.add_argument \
        ( "-f", "--file"
        , help    = "cty.dat file, default=%(default)s"
        , default = os.environ.get ('CTY_FILE', 'cty.dat')
        )
    cmd.add_argument \
        ( "-l", "--list"
        , help    = "List all entity names"
        , action  = "store_true"
        )
    cmd.add_argument \
        ( "-v", "--verbose"
        , help    = "Debug output"
        , action  = "store_true"
        )
    args = cmd.parse_args (argv)
    if args.verbose :
        logging.basicConfig (level = logging.DEBUG)
    try :
        cty = load (args.file)
    except CTY_Error as err :
        print ("Error: %s" % err, file = sys.stderr)
        return 1
    if args.list :
        for name in sorted (cty.countries) :
            print (name)
    for cs in args.callsign :
        entity = lookup (cty, cs)
        if entity is None :
            print ("%s: NOT FOUND" % cs)
        else :
            print ("%s: %s" % (cs, entity))
    return 0
# end def main

__all__ = ['CTY', 'Parse_State', 'parse_record', 'parse_line', 'load', 'lookup']

if __name__ == '__main__' :
    sys.exit (main ())
