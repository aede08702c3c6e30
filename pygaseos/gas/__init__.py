from .gas import calculator, gas_den, gas_z, gas_p, gas_mw, gas_props
