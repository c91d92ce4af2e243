"""Shell commands exposing arrowframe functionalities.

This module contains the shell commands that can be used to interact with arrowframe.

FView (file view)
=================

``arrowframe-fview`` shows the content of CSV and Parquet files::

    arrowframe-fview examples/data/penguins.csv

The rendering mode can be picked with ``--mode`` or through the
``ARROWFRAME_OUTPUT_MODE`` environment variable, and the data
can be selected and reshaped before it's rendered::

    arrowframe-fview --mode summary --columns Species Sex penguins.csv
    arrowframe-fview --head 3 --transpose ID penguins.csv
    arrowframe-fview --long Species Island penguins.csv

"""
