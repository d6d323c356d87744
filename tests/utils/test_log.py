import logging

from sigmaclip.utils.log import setup_log, shutdown_log


class TestLog(object):
    def test_file(self, tmpdir):
        # log into file
        filename = str(tmpdir.join('sigmaclip.log'))
        log = setup_log('sigmaclip.test', filename, stream=False)
        log.setLevel(logging.INFO)
        log.info('Hello world.')
        shutdown_log('sigmaclip.test')

        # check file
        with open(filename, 'r') as f:
            content = f.read()
        assert 'Hello world.' in content
        assert '[INFO    ]' in content
        assert len(log.handlers) == 0

    def test_no_header(self, tmpdir):
        filename = str(tmpdir.join('sigmaclip.log'))
        log = setup_log('sigmaclip.test', filename, stream=False, header=False)
        shutdown_log('sigmaclip.test')
        with open(filename, 'r') as f:
            assert f.read() == ''
