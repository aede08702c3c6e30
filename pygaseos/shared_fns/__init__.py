from .shared_fns import PropertyBundle, PROPERTY_UNITS, newton_log_volume_step, planck_einstein
