from bitarray.util import ba2int

from codepoint import convert
from codepoint.util import layout, pprint, payload_bits


# See: https://en.wikipedia.org/wiki/UTF-8

def code_point(s):
    print('codepoint:', s)
    print('character:', convert(s).decode('utf-8'))
    pprint(s)
    for marker, payload in layout(s):
        print('    %5s %s' % (marker.to01(), payload.to01()))

    # joining the payloads gives back the value bits
    print('value:', hex(ba2int(payload_bits(s))))
    print()


for s in 'U+0024 U+00A2 U+20AC U+D55C \\U00010348 U+10FFFF'.split():
    code_point(s)
