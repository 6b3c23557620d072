#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" exercise the scripting environment

.. codeauthor: Michael J. Hayford
"""

from paraxlab.environment import *


def test_scripting_session(capsys):
    opt_sys = OpticalSystem(title='two lens relay')
    opt_sys.add_lens(100., 0.)
    opt_sys.add_lens(100., 150.)

    results = opt_sys.trace_source(PointSource(-200., 0.), num_rays=3)
    assert all(isinstance(r, TraceResult) for r in results)

    listobj(opt_sys)
    listobj(opt_sys.lenses[0])
    listobj(opt_sys.calculate_image(-200.))
    out = capsys.readouterr().out
    assert out.startswith('two lens relay')
    assert 'thinlens 0' in out
    assert 'ImageData(' in out

    opt_sys.list_model()
    assert 'efl' in capsys.readouterr().out
