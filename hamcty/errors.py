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

class CTY_Error (Exception) :
    """ Base of all errors raised while loading a cty.dat file.
        The loader fills in lineno and line so that the message points
        to the offending input.
    """

    def __init__ (self, msg, lineno = None, line = None) :
        self.msg    = msg
        self.lineno = lineno
        self.line   = line
        super (CTY_Error, self).__init__ (msg)
    # end def __init__

    def __str__ (self) :
        if self.lineno is None :
            return self.msg
        return '%s: %s\n    %r' % (self.lineno, self.msg, self.line)
    # end def __str__

# end class CTY_Error

class CTY_IO_Error (CTY_Error, IOError) :
    """ The file can't be opened or read """
    pass

class Malformed_Record_Error (CTY_Error, ValueError) :
    """ Record with too few fields or a line we can't attribute """
    pass

class Field_Format_Error (CTY_Error, ValueError) :

    def __init__ (self, field, value, **kw) :
        self.field = field
        self.value = value
        msg = 'Invalid %s: %r' % (field, value)
        super (Field_Format_Error, self).__init__ (msg, **kw)
    # end def __init__

# end class Field_Format_Error

class Override_Format_Error (CTY_Error, ValueError) :

    def __init__ (self, kind, token, reason = 'invalid value', **kw) :
        self.kind  = kind
        self.token = token
        msg = '%s override in %r: %s' % (kind, token, reason)
        super (Override_Format_Error, self).__init__ (msg, **kw)
    # end def __init__

# end class Override_Format_Error

class Invalid_Timezone_Error (CTY_Error, ValueError) :
    """ UTC offset not representable as a fixed offset """
    pass

__all__ = \
    [ 'CTY_Error', 'CTY_IO_Error', 'Malformed_Record_Error'
    , 'Field_Format_Error', 'Override_Format_Error', 'Invalid_Timezone_Error'
    ]
