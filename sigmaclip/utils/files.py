import os
from typing import Tuple, Union

import numpy as np
import pandas as pd
from astropy.io import fits


FITS_EXTENSIONS = ['.fits', '.fit', '.fts']


def file_format(filename: str) -> str:
    """Returns the format of a file from its extension.

    Args:
        filename: Name of file.

    Returns:
        Either "fits" or "csv".

    Raises:
        ValueError: If format is not supported.
    """

    # strip compression
    name = filename[:-3] if filename.lower().endswith('.gz') else filename
    ext = os.path.splitext(name)[1].lower()

    # check it
    if ext in FITS_EXTENSIONS:
        return 'fits'
    elif ext == '.csv':
        return 'csv'
    else:
        raise ValueError('Unsupported file format for %s.' % filename)


def load_data(filename: str, hdu: Union[int, str] = 0, column: str = None) \
        -> Tuple[np.ndarray, Union[fits.Header, pd.DataFrame]]:
    """Loads an array from a FITS or CSV file.

    Args:
        filename: Name of file to load.
        hdu: Index or name of HDU to read array from in FITS files.
        column: Name of column in CSV files, defaults to first numeric one.

    Returns:
        Tuple of array and the FITS header or the full table, respectively.

    Raises:
        ValueError: If no data could be found.
    """

    if file_format(filename) == 'fits':
        # read array and header from HDU
        with fits.open(filename) as f:
            if f[hdu].data is None:
                raise ValueError('HDU %s in %s contains no data.' % (hdu, filename))
            return np.array(f[hdu].data), f[hdu].header.copy()

    else:
        # read table
        table = pd.read_csv(filename)

        # find column
        if column is None:
            numeric = table.select_dtypes(include=[np.number]).columns
            if len(numeric) == 0:
                raise ValueError('No numeric column found in %s.' % filename)
            column = numeric[0]
        elif column not in table.columns:
            raise ValueError('Column %s not found in %s.' % (column, filename))

        # return it
        return table[column].to_numpy(), table


def save_data(filename: str, data: np.ndarray, template: Union[fits.Header, pd.DataFrame] = None,
              column: str = None):
    """Writes an array into a FITS or CSV file.

    Args:
        filename: Name of file to write.
        data: Array to write, boolean arrays are written as uint8 into FITS files.
        template: FITS header or table as returned by load_data().
        column: Name of column to replace in table, defaults to first numeric one.
    """

    if file_format(filename) == 'fits':
        # FITS does not support booleans
        if data.dtype == bool:
            data = data.astype(np.uint8)

        # copy non-structural keywords from template, data is already scaled
        hdu = fits.PrimaryHDU(data)
        if isinstance(template, fits.Header):
            hdu.header.extend(template, strip=True, unique=True)
            for key in ['BZERO', 'BSCALE', 'BLANK']:
                hdu.header.remove(key, ignore_missing=True)

        # write it
        hdu.writeto(filename, overwrite=True)

    else:
        # no table given?
        if isinstance(template, pd.DataFrame):
            table = template.copy()
            if column is None:
                column = table.select_dtypes(include=[np.number]).columns[0]
        else:
            table = pd.DataFrame()
            column = 'value' if column is None else column

        # set column and write
        table[column] = data
        table.to_csv(filename, index=False)


__all__ = ['file_format', 'load_data', 'save_data']
