#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyGasEOS - AGA8 DETAIL and GERG-2008 natural gas equations of state
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

# GERG-2008 equation coefficients. Component order follows COMPONENTS.
# Published values are listed here; reduced forms used in the residual
# Helmholtz sums are derived from them when the gerg module is loaded.

# Molar masses (g/mol)
MMI = (16.04246, 28.0134, 44.0095, 30.06904, 44.09562, 58.1222, 58.1222, 72.14878, 72.14878,
       86.17536, 100.20194, 114.22852, 128.2551, 142.28168, 2.01588, 31.9988, 28.0101, 18.01528,
       34.08088, 4.002602, 39.948)

# Critical densities (mol/l)
DC = (10.139342719, 11.1839, 10.624978698, 6.87085454, 5.000043088, 3.86014294, 3.920016792,
      3.271, 3.215577588, 2.705877875, 2.315324434, 2.056404127, 1.81, 1.64, 14.94, 13.63,
      10.85, 17.87371609, 10.19, 17.399, 13.407429659)

# Critical temperatures (K)
TC = (190.564, 126.192, 304.1282, 305.322, 369.825, 407.817, 425.125, 460.35, 469.7, 507.82,
      540.13, 569.32, 594.55, 617.7, 33.19, 154.595, 132.86, 647.096, 373.1, 5.1953, 150.687)

# Pure fluid term layouts as (c, d, t). Polynomial terms have c = 0.
_SHORT_FORM = {
    'c': (0, 0, 0, 0, 0, 0, 1, 1, 2, 2, 3, 3),
    'd': (1, 1, 1, 2, 3, 7, 2, 5, 1, 4, 3, 4),
    't': (0.25, 1.125, 1.5, 1.375, 0.25, 0.875, 0.625, 1.75, 3.625, 3.625, 14.5, 12),
}

_LONG_FORM = {  # Methane, nitrogen and ethane
    'c': (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3, 6, 6, 6, 6),
    'd': (1, 1, 2, 2, 4, 4, 1, 1, 1, 2, 3, 6, 2, 3, 3, 4, 4, 2, 3, 4, 5, 6, 6, 7),
    't': (0.125, 1.125, 0.375, 1.125, 0.625, 1.5, 0.625, 2.625, 2.75, 2.125, 2, 1.75, 4.5, 4.75,
          5, 4, 4.5, 7.5, 14, 11.5, 26, 28, 30, 16),
}

_CO2_FORM = {
    'c': (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 2, 2, 3, 3, 3, 3, 3, 5, 5, 5, 6, 6),
    'd': (1, 1, 2, 3, 3, 3, 4, 5, 6, 6, 1, 4, 1, 1, 3, 3, 4, 5, 5, 5, 5, 5),
    't': (0, 1.25, 1.625, 0.375, 0.375, 1.375, 1.125, 1.375, 0.125, 1.625, 3.75, 3.5, 7.5, 8, 6,
          16, 11, 24, 26, 28, 24, 26),
}

_H2_FORM = {
    'c': (0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 3, 3, 5),
    'd': (1, 1, 2, 2, 4, 1, 5, 5, 5, 1, 1, 2, 5, 1),
    't': (0.5, 0.625, 0.375, 0.625, 1.125, 2.625, 0, 0.25, 1.375, 4, 4.25, 5, 8, 8),
}

_H2O_FORM = {
    'c': (0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 2, 2, 2, 3, 5, 5),
    'd': (1, 1, 1, 2, 2, 3, 4, 1, 5, 5, 1, 2, 4, 4, 1, 1),
    't': (0.5, 1.25, 1.875, 0.125, 1.5, 1, 0.75, 1.5, 0.625, 2.625, 5, 4, 4.5, 3, 4, 6),
}

_HE_FORM = {
    'c': (0, 0, 0, 0, 1, 1, 1, 1, 1, 2, 3, 3),
    'd': (1, 1, 1, 4, 1, 3, 5, 5, 5, 2, 1, 2),
    't': (0, 0.125, 0.75, 1, 0.75, 2.625, 0.125, 1.25, 2, 1, 4.5, 5),
}

PURE_FORMS = tuple(
    {0: _LONG_FORM, 1: _LONG_FORM, 2: _CO2_FORM, 3: _LONG_FORM,
     14: _H2_FORM, 17: _H2O_FORM, 19: _HE_FORM}.get(i, _SHORT_FORM)
    for i in range(21)
)

# Pure fluid coefficients
NOIK = (
    # Methane
    (0.57335704239162, -1.676068752373, 0.23405291834916, -0.21947376343441, 0.016369201404128,
     0.01500440638928, 0.098990489492918, 0.58382770929055, -0.7478686756039, 0.30033302857974,
     0.20985543806568, -0.018590151133061, -0.15782558339049, 0.12716735220791, -0.032019743894346,
     -0.068049729364536, 0.024291412853736, 5.1440451639444E-03, -0.019084949733532,
     5.5229677241291E-03, -4.4197392976085E-03, 0.040061416708429, -0.033752085907575,
     -2.5127658213357E-03),
    # Nitrogen
    (0.59889711801201, -1.6941557480731, 0.24579736191718, -0.23722456755175,
     0.017954918715141, 0.014592875720215, 0.10008065936206, 0.73157115385532, -0.88372272336366,
     0.31887660246708, 0.20766491728799, -0.019379315454158, -0.16936641554983, 0.13546846041701,
     -0.033066712095307, -0.060690817018557, 0.012797548292871, 5.8743664107299E-03,
     -0.018451951971969, 4.7226622042472E-03, -5.2024079680599E-03, 0.043563505956635,
     -0.036251690750939, -2.8974026866543E-03),
    # Carbon dioxide
    (0.52646564804653, -1.4995725042592, 0.27329786733782, 0.12949500022786, 0.15404088341841,
     -0.58186950946814, -0.18022494838296, -0.095389904072812, -8.0486819317679E-03,
     -0.03554775127309, -0.28079014882405, -0.082435890081677, 0.010832427979006,
     -6.7073993161097E-03, -4.6827907600524E-03, -0.028359911832177, 0.019500174744098,
     -0.21609137507166, 0.43772794926972, -0.22130790113593, 0.015190189957331, -0.0153809489533),
    # Ethane
    (0.63596780450714, -1.7377981785459, 0.28914060926272, -0.33714276845694,
     0.022405964699561, 0.015715424886913, 0.11450634253745, 1.0612049379745, -1.2855224439423,
     0.39414630777652, 0.31390924682041, -0.021592277117247, -0.21723666564905, -0.28999574439489,
     0.42321173025732, 0.04643410025926, -0.13138398329741, 0.011492850364368, -0.033387688429909,
     0.015183171583644, -4.7610805647657E-03, 0.046917166277885, -0.039401755804649,
     -3.2569956247611E-03),
    # Propane
    (1.0403973107358, -2.8318404081403, 0.84393809606294, -0.076559591850023, 0.09469737305728,
     2.4796475497006E-04, 0.2774376042287, -0.043846000648377, -0.2699106478435, -0.06931341308986,
     -0.029632145981653, 0.01404012675138),
    # Isobutane
    (1.04293315891, -2.8184272548892, 0.8617623239785, -0.10613619452487, 0.098615749302134,
     2.3948208682322E-04, 0.3033000485695, -0.041598156135099, -0.29991937470058,
     -0.080369342764109, -0.029761373251151, 0.01305963030314),
    # n-Butane
    (1.0626277411455, -2.862095182835, 0.88738233403777, -0.12570581155345, 0.10286308708106,
     2.5358040602654E-04, 0.32325200233982, -0.037950761057432, -0.32534802014452,
     -0.079050969051011, -0.020636720547775, 0.005705380933475),
    # Isopentane
    (1.0963, -3.0402, 1.0317, -0.1541, 0.11535, 0.00029809, 0.39571, -0.045881, -0.35804,
     -0.10107, -0.035484, 0.018156),
    # n-Pentane
    (1.0968643098001, -2.9988888298061, 0.99516886799212, -0.16170708558539, 0.11334460072775,
     2.6760595150748E-04, 0.40979881986931, -0.040876423083075, -0.38169482469447,
     -0.10931956843993, -0.03207322332799, 0.016877016216975),
    # Hexane
    (1.0553238013661, -2.6120615890629, 0.7661388296726, -0.29770320622459, 0.11879907733358,
     2.7922861062617E-04, 0.46347589844105, 0.011433196980297, -0.48256968738131,
     -0.093750558924659, -6.7273247155994E-03, -5.1141583585428E-03),
    # Heptane
    (1.0543747645262, -2.6500681506144, 0.81730047827543, -0.30451391253428, 0.122538687108,
     2.7266472743928E-04, 0.4986582568167, -7.1432815084176E-04, -0.5423689552545,
     -0.13801821610756, -6.1595287380011E-03, 4.8602510393022E-04),
    # Octane
    (1.0722544875633, -2.4632951172003, 0.65386674054928, -0.36324974085628, 0.12713269626764,
     3.071357277793E-04, 0.5265685698754, 0.019362862857653, -0.58939426849155, -0.14069963991934,
     -7.8966330500036E-03, 3.3036597968109E-03),
    # Nonane
    (1.1151, -2.702, 0.83416, -0.38828, 0.1376, 0.00028185, 0.62037, 0.015847, -0.61726,
     -0.15043, -0.012982, 0.0044325),
    # Decane
    (1.0461, -2.4807, 0.74372, -0.52579, 0.15315, 0.00032865, 0.84178, 0.055424, -0.73555,
     -0.18507, -0.020775, 0.012335),
    # Hydrogen
    (5.3579928451252, -6.2050252530595, 0.13830241327086, -0.071397954896129,
     0.015474053959733, -0.14976806405771, -0.026368723988451, 0.056681303156066,
     -0.060063958030436, -0.45043942027132, 0.424788402445, -0.021997640827139, -0.01049952137453,
     -2.8955902866816E-03),
    # Oxygen
    (0.88878286369701, -2.4879433312148, 0.59750190775886, 9.6501817061881E-03,
     0.07197042871277, 2.2337443000195E-04, 0.18558686391474, -0.03812936803576, -0.15352245383006,
     -0.026726814910919, -0.025675298677127, 9.5714302123668E-03),
    # Carbon monoxide
    (0.90554, -2.4515, 0.53149, 0.024173, 0.072156, 0.00018818, 0.19405, -0.043268, -0.12778,
     -0.027896, -0.034154, 0.016329),
    # Water
    (0.82728408749586, -1.8602220416584, -1.1199009613744, 0.15635753976056, 0.87375844859025,
     -0.36674403715731, 0.053987893432436, 1.0957690214499, 0.053213037828563, 0.013050533930825,
     -0.41079520434476, 0.1463744334412, -0.055726838623719, -0.0112017741438, -6.6062758068099E-03,
     4.6918522004538E-03),
    # Hydrogen sulfide
    (0.87641, -2.0367, 0.21634, -0.050199, 0.066994, 0.00019076, 0.20227, -0.0045348, -0.2223,
     -0.034714, -0.014885, 0.0074154),
    # Helium
    (-0.45579024006737, 1.2516390754925, -1.5438231650621, 0.020467489707221,
     -0.34476212380781, -0.020858459512787, 0.016227414711778, -0.057471818200892,
     0.019462416430715, -0.03329568012302, -0.010863577372367, -0.022173365245954),
    # Argon
    (0.85095714803969, -2.400322294348, 0.54127841476466, 0.016919770692538, 0.068825965019035,
     2.1428032815338E-04, 0.17429895321992, -0.033654495604194, -0.13526799857691,
     -0.016387350791552, -0.024987666851475, 8.8769204815709E-03),
)

# Binary departure functions. Each term is (n, d, t, eta, epsilon, beta, gamma);
# polynomial terms carry zeros in the last four places.
DEPARTURE_MODELS = {
    1: (2, (  # CH4-C2H6
        (-8.0926050298746E-04, 3, 0.65, 0, 0, 0, 0),
        (-7.5381925080059E-04, 4, 1.55, 0, 0, 0, 0),
        (-0.041618768891219, 1, 3.1, 1, 0.5, 1, 0.5),
        (-0.23452173681569, 2, 5.9, 1, 0.5, 1, 0.5),
        (0.14003840584586, 2, 7.05, 1, 0.5, 1, 0.5),
        (0.063281744807738, 2, 3.35, 0.875, 0.5, 1.25, 0.5),
        (-0.034660425848809, 2, 1.2, 0.75, 0.5, 1.5, 0.5),
        (-0.23918747334251, 2, 5.8, 0.5, 0.5, 2, 0.5),
        (1.9855255066891E-03, 2, 2.7, 0, 0.5, 3, 0.5),
        (6.1777746171555, 3, 0.45, 0, 0.5, 3, 0.5),
        (-6.9575358271105, 3, 0.55, 0, 0.5, 3, 0.5),
        (1.0630185306388, 3, 1.95, 0, 0.5, 3, 0.5),
    )),
    2: (5, (  # CH4-C3H8
        (0.013746429958576, 3, 1.85, 0, 0, 0, 0),
        (-7.4425012129552E-03, 3, 3.95, 0, 0, 0, 0),
        (-4.5516600213685E-03, 4, 0, 0, 0, 0, 0),
        (-5.4546603350237E-03, 4, 1.85, 0, 0, 0, 0),
        (2.3682016824471E-03, 4, 3.85, 0, 0, 0, 0),
        (0.18007763721438, 1, 5.25, 0.25, 0.5, 0.75, 0.5),
        (-0.44773942932486, 1, 3.85, 0.25, 0.5, 1, 0.5),
        (0.0193273748882, 1, 0.2, 0, 0.5, 2, 0.5),
        (-0.30632197804624, 2, 6.5, 0, 0.5, 3, 0.5),
    )),
    3: (2, (  # CH4-N2
        (-9.8038985517335E-03, 1, 0, 0, 0, 0, 0),
        (4.2487270143005E-04, 4, 1.85, 0, 0, 0, 0),
        (-0.034800214576142, 1, 7.85, 1, 0.5, 1, 0.5),
        (-0.13333813013896, 2, 5.4, 1, 0.5, 1, 0.5),
        (-0.011993694974627, 2, 0, 0.25, 0.5, 2.5, 0.5),
        (0.069243379775168, 2, 0.75, 0, 0.5, 3, 0.5),
        (-0.31022508148249, 2, 2.8, 0, 0.5, 3, 0.5),
        (0.24495491753226, 2, 4.45, 0, 0.5, 3, 0.5),
        (0.22369816716981, 3, 4.25, 0, 0.5, 3, 0.5),
    )),
    4: (3, (  # CH4-CO2
        (-0.10859387354942, 1, 2.6, 0, 0, 0, 0),
        (0.080228576727389, 2, 1.95, 0, 0, 0, 0),
        (-9.3303985115717E-03, 3, 0, 0, 0, 0, 0),
        (0.040989274005848, 1, 3.95, 1, 0.5, 1, 0.5),
        (-0.24338019772494, 2, 7.95, 0.5, 0.5, 2, 0.5),
        (0.23855347281124, 3, 8, 0, 0.5, 3, 0.5),
    )),
    5: (2, (  # N2-CO2
        (0.28661625028399, 2, 1.85, 0, 0, 0, 0),
        (-0.10919833861247, 3, 1.4, 0, 0, 0, 0),
        (-1.137403208227, 1, 3.2, 0.25, 0.5, 0.75, 0.5),
        (0.76580544237358, 1, 2.5, 0.25, 0.5, 1, 0.5),
        (4.2638000926819E-03, 1, 8, 0, 0.5, 2, 0.5),
        (0.17673538204534, 2, 3.75, 0, 0.5, 3, 0.5),
    )),
    6: (3, (  # N2-C2H6
        (-0.47376518126608, 2, 0, 0, 0, 0, 0),
        (0.48961193461001, 2, 0.05, 0, 0, 0, 0),
        (-5.7011062090535E-03, 3, 0, 0, 0, 0, 0),
        (-0.1996682004132, 1, 3.65, 1, 0.5, 1, 0.5),
        (-0.69411103101723, 2, 4.9, 1, 0.5, 1, 0.5),
        (0.69226192739021, 2, 4.45, 0.875, 0.5, 1.25, 0.5),
    )),
    7: (4, (  # CH4-H2
        (-0.25157134971934, 1, 2, 0, 0, 0, 0),
        (-6.2203841111983E-03, 3, -1, 0, 0, 0, 0),
        (0.088850315184396, 3, 1.75, 0, 0, 0, 0),
        (-0.035592212573239, 4, 1.4, 0, 0, 0, 0),
    )),
    10: (10, (  # Generalized for alkane pairs
        (2.5574776844118, 1, 1, 0, 0, 0, 0),
        (-7.9846357136353, 1, 1.55, 0, 0, 0, 0),
        (4.7859131465806, 1, 1.7, 0, 0, 0, 0),
        (-0.73265392369587, 2, 0.25, 0, 0, 0, 0),
        (1.3805471345312, 2, 1.35, 0, 0, 0, 0),
        (0.28349603476365, 3, 0, 0, 0, 0, 0),
        (-0.49087385940425, 3, 1.25, 0, 0, 0, 0),
        (-0.10291888921447, 4, 0, 0, 0, 0, 0),
        (0.11836314681968, 4, 0.7, 0, 0, 0, 0),
        (5.5527385721943E-05, 4, 5.4, 0, 0, 0, 0),
    )),
}

# (i, j): (departure model, Fij)
DEPARTURE_PAIRS = {
    (0, 1): (3, 1.0),
    (0, 2): (4, 1.0),
    (0, 3): (1, 1.0),
    (0, 4): (2, 1.0),
    (0, 5): (10, 0.771035405688),
    (0, 6): (10, 1.0),
    (0, 14): (7, 1.0),
    (1, 2): (5, 1.0),
    (1, 3): (6, 1.0),
    (3, 4): (10, 0.13042476515),
    (3, 5): (10, 0.260632376098),
    (3, 6): (10, 0.281570073085),
    (4, 5): (10, -0.0551609771024),
    (4, 6): (10, 0.0312572600489),
    (5, 6): (10, -0.0551240293009),
}

# Reducing function parameters (i, j): (beta_v, gamma_v, beta_t, gamma_t).
# Unlisted pairs are 1.
REDUCING = {
    (0, 1): (0.998721377, 1.013950311, 0.99809883, 0.979273013),  # CH4-N2
    (0, 2): (0.999518072, 1.002806594, 1.02262449, 0.975665369),  # CH4-CO2
    (0, 3): (0.997547866, 1.006617867, 0.996336508, 1.049707697),  # CH4-C2H6
    (0, 4): (1.00482707, 1.038470657, 0.989680305, 1.098655531),  # CH4-C3H8
    (0, 5): (1.011240388, 1.054319053, 0.980315756, 1.161117729),  # CH4-i-C4H10
    (0, 6): (0.979105972, 1.045375122, 0.99417491, 1.171607691),  # CH4-C4H10
    (0, 7): (1, 1.343685343, 1, 1.188899743),  # CH4-i-C5H12
    (0, 8): (0.94833012, 1.124508039, 0.992127525, 1.249173968),  # CH4-C5H12
    (0, 9): (0.958015294, 1.052643846, 0.981844797, 1.330570181),  # CH4-C6H14
    (0, 10): (0.962050831, 1.156655935, 0.977431529, 1.379850328),  # CH4-C7H16
    (0, 11): (0.994740603, 1.116549372, 0.957473785, 1.449245409),  # CH4-C8H18
    (0, 12): (1.002852287, 1.141895355, 0.947716769, 1.528532478),  # CH4-C9H20
    (0, 13): (1.033086292, 1.146089637, 0.937777823, 1.568231489),  # CH4-C10H22
    (0, 14): (1, 1.018702573, 1, 1.352643115),  # CH4-H2
    (0, 15): (1, 1, 1, 0.95),  # CH4-O2
    (0, 16): (0.997340772, 1.006102927, 0.987411732, 0.987473033),  # CH4-CO
    (0, 17): (1.012783169, 1.585018334, 1.063333913, 0.775810513),  # CH4-H2O
    (0, 18): (1.012599087, 1.040161207, 1.011090031, 0.961155729),  # CH4-H2S
    (0, 19): (1, 0.881405683, 1, 3.159776855),  # CH4-He
    (0, 20): (1.034630259, 1.014678542, 0.990954281, 0.989843388),  # CH4-Ar
    (1, 2): (0.977794634, 1.047578256, 1.005894529, 1.107654104),  # N2-CO2
    (1, 3): (0.978880168, 1.042352891, 1.007671428, 1.098650964),  # N2-C2H6
    (1, 4): (0.974424681, 1.081025408, 1.002677329, 1.201264026),  # N2-C3H8
    (1, 5): (0.98641583, 1.100576129, 0.99286813, 1.284462634),  # N2-i-C4H10
    (1, 6): (0.99608261, 1.146949309, 0.994515234, 1.304886838),  # N2-C4H10
    (1, 7): (1, 1.154135439, 1, 1.38177077),  # N2-i-C5H12
    (1, 8): (1, 1.078877166, 1, 1.419029041),  # N2-C5H12
    (1, 9): (1, 1.195952177, 1, 1.472607971),  # N2-C6H14
    (1, 10): (1, 1.40455409, 1, 1.520975334),  # N2-C7H16
    (1, 11): (1, 1.186067025, 1, 1.733280051),  # N2-C8H18
    (1, 12): (1, 1.100405929, 0.95637945, 1.749119996),  # N2-C9H20
    (1, 13): (1, 1, 0.957934447, 1.822157123),  # N2-C10H22
    (1, 14): (0.972532065, 0.970115357, 0.946134337, 1.175696583),  # N2-H2
    (1, 15): (0.99952177, 0.997082328, 0.997190589, 0.995157044),  # N2-O2
    (1, 16): (1, 1.008690943, 1, 0.993425388),  # N2-CO
    (1, 17): (1, 1.094749685, 1, 0.968808467),  # N2-H2O
    (1, 18): (0.910394249, 1.256844157, 1.004692366, 0.9601742),  # N2-H2S
    (1, 19): (0.969501055, 0.932629867, 0.692868765, 1.47183158),  # N2-He
    (1, 20): (1.004166412, 1.002212182, 0.999069843, 0.990034831),  # N2-Ar
    (2, 3): (1.002525718, 1.032876701, 1.013871147, 0.90094953),  # CO2-C2H6
    (2, 4): (0.996898004, 1.047596298, 1.033620538, 0.908772477),  # CO2-C3H8
    (2, 5): (1.076551882, 1.081909003, 1.023339824, 0.929982936),  # CO2-i-C4H10
    (2, 6): (1.174760923, 1.222437324, 1.018171004, 0.911498231),  # CO2-C4H10
    (2, 7): (1.060793104, 1.116793198, 1.019180957, 0.961218039),  # CO2-i-C5H12
    (2, 8): (1.024311498, 1.068406078, 1.027000795, 0.979217302),  # CO2-C5H12
    (2, 9): (1, 0.851343711, 1, 1.038675574),  # CO2-C6H14
    (2, 10): (1.205469976, 1.164585914, 1.011806317, 1.046169823),  # CO2-C7H16
    (2, 11): (1.026169373, 1.104043935, 1.02969078, 1.074455386),  # CO2-C8H18
    (2, 12): (1, 0.973386152, 1.00768862, 1.140671202),  # CO2-C9H20
    (2, 13): (1.000151132, 1.183394668, 1.02002879, 1.145512213),  # CO2-C10H22
    (2, 14): (0.904142159, 1.15279255, 0.942320195, 1.782924792),  # CO2-H2
    (2, 17): (0.949055959, 1.542328793, 0.997372205, 0.775453996),  # CO2-H2O
    (2, 18): (0.906630564, 1.024085837, 1.016034583, 0.92601888),  # CO2-H2S
    (2, 19): (0.846647561, 0.864141549, 0.76837763, 3.207456948),  # CO2-He
    (2, 20): (1.008392428, 1.029205465, 0.996512863, 1.050971635),  # CO2-Ar
    (3, 4): (0.997607277, 1.00303472, 0.996199694, 1.01473019),  # C2H6-C3H8
    (3, 5): (1, 1.006616886, 1, 1.033283811),  # C2H6-i-C4H10
    (3, 6): (0.999157205, 1.006179146, 0.999130554, 1.034832749),  # C2H6-C4H10
    (3, 7): (1, 1.045439935, 1, 1.021150247),  # C2H6-i-C5H12
    (3, 8): (0.993851009, 1.026085655, 0.998688946, 1.066665676),  # C2H6-C5H12
    (3, 9): (1, 1.169701102, 1, 1.092177796),  # C2H6-C6H14
    (3, 10): (1, 1.057666085, 1, 1.134532014),  # C2H6-C7H16
    (3, 11): (1.007469726, 1.071917985, 0.984068272, 1.168636194),  # C2H6-C8H18
    (3, 12): (1, 1.14353473, 1, 1.05603303),  # C2H6-C9H20
    (3, 13): (0.995676258, 1.098361281, 0.970918061, 1.237191558),  # C2H6-C10H22
    (3, 14): (0.925367171, 1.10607204, 0.932969831, 1.902008495),  # C2H6-H2
    (3, 16): (1, 1.201417898, 1, 1.069224728),  # C2H6-CO
    (3, 18): (1.010817909, 1.030988277, 0.990197354, 0.90273666),  # C2H6-H2S
    (4, 5): (0.999243146, 1.001156119, 0.998012298, 1.005250774),  # C3H8-i-C4H10
    (4, 6): (0.999795868, 1.003264179, 1.000310289, 1.007392782),  # C3H8-C4H10
    (4, 7): (1.040459289, 0.999432118, 0.994364425, 1.0032695),  # C3H8-i-C5H12
    (4, 8): (1.044919431, 1.019921513, 0.996484021, 1.008344412),  # C3H8-C5H12
    (4, 9): (1, 1.057872566, 1, 1.025657518),  # C3H8-C6H14
    (4, 10): (1, 1.079648053, 1, 1.050044169),  # C3H8-C7H16
    (4, 11): (1, 1.102764612, 1, 1.063694129),  # C3H8-C8H18
    (4, 12): (1, 1.199769134, 1, 1.109973833),  # C3H8-C9H20
    (4, 13): (0.984104227, 1.053040574, 0.985331233, 1.140905252),  # C3H8-C10H22
    (4, 14): (1, 1.07400611, 1, 2.308215191),  # C3H8-H2
    (4, 16): (1, 1.108143673, 1, 1.197564208),  # C3H8-CO
    (4, 17): (1, 1.011759763, 1, 0.600340961),  # C3H8-H2O
    (4, 18): (0.936811219, 1.010593999, 0.992573556, 0.905829247),  # C3H8-H2S
    (5, 6): (0.999120311, 1.00041444, 0.999922459, 1.001432824),  # C4H10-i-C4H10
    (5, 7): (1, 1.002284353, 1, 1.001835788),  # i-C4H10-i-C5H1
    (5, 8): (1, 1.002779804, 1, 1.002495889),  # i-C4H10-C5H12
    (5, 9): (1, 1.010493989, 1, 1.006018054),  # i-C4H10-C6H14
    (5, 10): (1, 1.021668316, 1, 1.00988576),  # i-C4H10-C7H16
    (5, 11): (1, 1.032807063, 1, 1.013945424),  # i-C4H10-C8H18
    (5, 12): (1, 1.047298475, 1, 1.017817492),  # i-C4H10-C9H20
    (5, 13): (1, 1.060243344, 1, 1.021624748),  # i-C4H10-C10H22
    (5, 14): (1, 1.147595688, 1, 1.895305393),  # i-C4H10-H2
    (5, 16): (1, 1.087272232, 1, 1.161390082),  # i-C4H10-CO
    (5, 18): (1.012994431, 0.988591117, 0.974550548, 0.937130844),  # i-C4H10-H2S
    (6, 7): (1, 1.002728434, 1, 1.000792201),  # C4H10-i-C5H12
    (6, 8): (1, 1.01815965, 1, 1.00214364),  # C4H10-C5H12
    (6, 9): (1, 1.034995284, 1, 1.00915706),  # C4H10-C6H14
    (6, 10): (1, 1.019174227, 1, 1.021283378),  # C4H10-C7H16
    (6, 11): (1, 1.046905515, 1, 1.033180106),  # C4H10-C8H18
    (6, 12): (1, 1.049219137, 1, 1.014096448),  # C4H10-C9H20
    (6, 13): (0.976951968, 1.027845529, 0.993688386, 1.076466918),  # C4H10-C10H22
    (6, 14): (1, 1.232939523, 1, 2.509259945),  # C4H10-H2
    (6, 16): (1, 1.084740904, 1, 1.173916162),  # C4H10-CO
    (6, 17): (1, 1.223638763, 1, 0.615512682),  # C4H10-H2O
    (6, 18): (0.908113163, 1.033366041, 0.985962886, 0.926156602),  # C4H10-H2S
    (6, 20): (1, 1.214638734, 1, 1.245039498),  # C4H10-Ar
    (7, 8): (1, 1.000024335, 1, 1.000050537),  # C5H12-i-C5H12
    (7, 9): (1, 1.002995876, 1, 1.001204174),  # i-C5H12-C6H14
    (7, 10): (1, 1.009928206, 1, 1.003194615),  # i-C5H12-C7H16
    (7, 11): (1, 1.017880545, 1, 1.00564748),  # i-C5H12-C8H18
    (7, 12): (1, 1.028994325, 1, 1.008191499),  # i-C5H12-C9H20
    (7, 13): (1, 1.039372957, 1, 1.010825138),  # i-C5H12-C10H22
    (7, 14): (1, 1.184340443, 1, 1.996386669),  # i-C5H12-H2
    (7, 16): (1, 1.116694577, 1, 1.199326059),  # i-C5H12-CO
    (7, 18): (1, 0.835763343, 1, 0.982651529),  # i-C5H12-H2S
    (8, 9): (1, 1.002480637, 1, 1.000761237),  # C5H12-C6H14
    (8, 10): (1, 1.008972412, 1, 1.002441051),  # C5H12-C7H16
    (8, 11): (1, 1.069223964, 1, 1.016422347),  # C5H12-C8H18
    (8, 12): (1, 1.034910633, 1, 1.103421755),  # C5H12-C9H20
    (8, 13): (1, 1.016370338, 1, 1.049035838),  # C5H12-C10H22
    (8, 14): (1, 1.188334783, 1, 2.013859174),  # C5H12-H2
    (8, 16): (1, 1.119954454, 1, 1.206043295),  # C5H12-CO
    (8, 17): (1, 0.95667731, 1, 0.447666011),  # C5H12-H2O
    (8, 18): (0.984613203, 1.076539234, 0.962006651, 0.959065662),  # C5H12-H2S
    (9, 10): (1, 1.001508227, 1, 0.999762786),  # C6H14-C7H16
    (9, 11): (1, 1.006268954, 1, 1.001633952),  # C6H14-C8H18
    (9, 12): (1, 1.02076168, 1, 1.055369591),  # C6H14-C9H20
    (9, 13): (1.001516371, 1.013511439, 0.99764101, 1.028939539),  # C6H14-C10H22
    (9, 14): (1, 1.243461678, 1, 3.021197546),  # C6H14-H2
    (9, 16): (1, 1.155145836, 1, 1.233272781),  # C6H14-CO
    (9, 17): (1, 1.170217596, 1, 0.569681333),  # C6H14-H2O
    (9, 18): (0.754473958, 1.339283552, 0.985891113, 0.956075596),  # C6H14-H2S
    (10, 11): (1, 1.006767176, 1, 0.998793111),  # C7H16-C8H18
    (10, 12): (1, 1.001370076, 1, 1.001150096),  # C7H16-C9H20
    (10, 13): (1, 1.002972346, 1, 1.002229938),  # C7H16-C10H22
    (10, 14): (1, 1.159131722, 1, 3.169143057),  # C7H16-H2
    (10, 16): (1, 1.190354273, 1, 1.256123503),  # C7H16-CO
    (10, 18): (0.828967164, 1.087956749, 0.988937417, 1.013453092),  # C7H16-H2S
    (11, 12): (1, 1.001357085, 1, 1.000235044),  # C8H18-C9H20
    (11, 13): (1, 1.002553544, 1, 1.007186267),  # C8H18-C10H22
    (11, 14): (1, 1.305249405, 1, 2.191555216),  # C8H18-H2
    (11, 16): (1, 1.219206702, 1, 1.276565536),  # C8H18-CO
    (11, 17): (1, 0.599484191, 1, 0.662072469),  # C8H18-H2O
    (12, 13): (1, 1.00081052, 1, 1.000182392),  # C9H20-C10H22
    (12, 14): (1, 1.342647661, 1, 2.23435404),  # C9H20-H2
    (12, 16): (1, 1.252151449, 1, 1.294070556),  # C9H20-CO
    (12, 18): (1, 1.082905109, 1, 1.086557826),  # C9H20-H2S
    (13, 14): (1.695358382, 1.120233729, 1.064818089, 3.786003724),  # C10H22-H2
    (13, 16): (1, 0.87018496, 1.049594632, 1.803567587),  # C10H22-CO
    (13, 17): (1, 0.551405318, 0.897162268, 0.740416402),  # C10H22-H2O
    (13, 18): (0.975187766, 1.171714677, 0.973091413, 1.103693489),  # C10H22-H2S
    (14, 16): (1, 1.121416201, 1, 1.377504607),  # H2-CO
    (15, 17): (1, 1.143174289, 1, 0.964767932),  # O2-H2O
    (15, 20): (0.999746847, 0.993907223, 1.000023103, 0.990430423),  # O2-Ar
    (16, 18): (0.795660392, 1.101731308, 1.025536736, 1.022749748),  # CO-H2S
    (16, 20): (1, 1.159720623, 1, 0.954215746),  # CO-Ar
    (17, 18): (1, 1.014832832, 1, 0.940587083),  # H2O-H2S
    (17, 20): (1, 1.038993495, 1, 1.070941866),  # H2O-Ar
}
