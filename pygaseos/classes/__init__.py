from .classes import (eos_method, density_flag, composition_error, density_error, class_dic,
                      CompositionError, EmptyCompositionError, BadSumCompositionError,
                      DensityError, PressureTooLowError, IterationFailError)
