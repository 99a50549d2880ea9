"""Function range and name label collection."""

from export_primitives import hex_token, relative_hex


def function_range(func, image_base):
    body = func.getBody()
    start = relative_hex(body.getMinAddress(), image_base)
    end = relative_hex(body.getMaxAddress(), image_base)
    # icount is the size of the body's address set, not a decoded instruction count.
    icount = hex_token(int(body.getNumAddresses()))
    return start, end, icount


def collect_functions(program, database):
    count = 0
    for func in program.getFunctionManager().getFunctions(True):
        start, end, icount = function_range(func, database.image_base)
        database.add_function(start, end, icount, func.getName())
        count += 1
    return count
