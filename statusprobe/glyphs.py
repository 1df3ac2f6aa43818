def surrogatepass(code):
    return code.encode('utf-16', 'surrogatepass').decode('utf-16')

# Network
cod_arrow_small_down = surrogatepass('\uea9d')
cod_arrow_small_up   = surrogatepass('\ueaa0')

# CPU
oct_cpu = surrogatepass('\uf4bc')

# Memory
cod_arrow_swap = surrogatepass('\uebcb')
md_memory      = surrogatepass('\udb80\udf5b')

# Misc
icon_spacer = ' '
