"""Coursework measurement-reduction pipeline (photometry, spectroscopy, fits).

Scripts mirror the three lab reductions:
  - python active/scripts/hubble_diagram.py --out_dir results/
  - python active/scripts/pleiades_hr_diagram.py --out_dir results/
  - python active/scripts/bllac_variability.py --materials materials/ --out_dir results/
"""
