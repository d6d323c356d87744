import argparse
import logging
import sys
from typing import List

import numpy as np

from sigmaclip.clipper import SigmaClip
from sigmaclip.config import load_config
from sigmaclip.utils.files import load_data, save_data
from sigmaclip.utils.log import setup_log, shutdown_log


def clip_file(clipper: SigmaClip, args: argparse.Namespace, log: logging.Logger):
    """Clips the data in the input file and writes the result into the output file.

    Args:
        clipper: Configured sigma clipper.
        args: Parsed command line arguments.
        log: Logger to use.
    """

    # load data
    log.info('Loading data from %s...', args.input)
    data, template = load_data(args.input, hdu=args.hdu, column=args.column)
    log.info('Found %d values with shape %s.', data.size, data.shape)

    # row-wise?
    if args.rows:
        # check shape
        if data.ndim != 2:
            raise ValueError('Row-wise clipping requires 2D data, got %d dimensions.' % data.ndim)
        log.info('Clipping %d rows separately...', data.shape[0])

        if args.mode == 'nan':
            result, bounds = clipper.clip_rows(data)
            outliers = np.isnan(result)
        else:
            # one buffer for all rows
            dtype = data.dtype if np.issubdtype(data.dtype, np.floating) else np.float64
            buffer = np.empty(data.shape[1], dtype=dtype)
            result = np.empty(data.shape, dtype=bool)
            for i in range(data.shape[0]):
                clipper.mask(data[i], buffer=buffer, out=result[i])
            outliers = result

    else:
        # clip whole array
        log.info('Clipping data...')
        lower, upper = clipper.bounds(data)
        log.info('Found bounds [%g, %g].', lower, upper)
        if args.mode == 'nan':
            result = clipper.clip(data)
            outliers = np.isnan(result)
        else:
            result = clipper.mask(data)
            outliers = result

    # write result
    log.info('Marked %d of %d values as outliers.', np.sum(outliers), data.size)
    log.info('Writing result to %s...', args.output)
    save_data(args.output, result, template=template, column=args.column)


def main(argv: List[str] = None) -> int:
    # init parser
    parser = argparse.ArgumentParser(description='sigmaclip iterative sigma clipping tool',
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('input', help='FITS or CSV file to clip', type=str)
    parser.add_argument('output', help='FITS or CSV file to write result into', type=str)
    parser.add_argument('-c', '--config', help='YAML configuration file', type=argparse.FileType('r'))
    parser.add_argument('--sigma-lower', help='lower clipping bound in dispersions', type=float)
    parser.add_argument('--sigma-upper', help='upper clipping bound in dispersions', type=float)
    parser.add_argument('--maxiter', help='maximum number of iterations, -1 for no limit', type=int)
    parser.add_argument('--mode', help='write clipped data with NaNs or outlier mask', choices=['nan', 'mask'],
                        default='nan')
    parser.add_argument('--rows', help='clip each row of a 2D array separately', action='store_true')
    parser.add_argument('--hdu', help='HDU to read from FITS file', type=int, default=0)
    parser.add_argument('--column', help='column to clip in CSV file, defaults to first numeric one', type=str)
    parser.add_argument('--log', help='file to write log into', type=str)
    parser.add_argument('-v', '--verbose', help='show debug output', action='store_true')

    # parse args
    args = parser.parse_args(argv)

    # init logging
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.INFO)
    log = setup_log('sigmaclip.main', args.log, mode='w')

    try:
        # load config and apply command line options
        config = load_config(args.config)
        for key in ['sigma_lower', 'sigma_upper', 'maxiter']:
            if getattr(args, key) is not None:
                config[key] = getattr(args, key)

        # create clipper and run it
        clipper = SigmaClip.from_config(config, log=log)
        clip_file(clipper, args, log)
        log.info('Finished.')

    except (ValueError, TypeError, OSError) as e:
        log.error('Clipping failed: %s', e)
        return 1

    finally:
        if args.config is not None:
            args.config.close()
        shutdown_log('sigmaclip.main')

    return 0


if __name__ == '__main__':
    sys.exit(main())
