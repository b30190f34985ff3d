from setuptools import find_packages, setup


def main():
    with open('README.md', encoding='utf-8') as f:
        long_description = f.read()

    setup(
        name='mathlang',
        version='0.1.0',
        description='Lexical scanner for a small math expression language',
        long_description=long_description,
        long_description_content_type='text/markdown',
        packages=find_packages(exclude=['test', 'test.*']),
        python_requires='>=3.6',
        install_requires=[
            'click',
            'prompt-toolkit'
        ],
        tests_require=['pytest'],
        extras_require={'test': ['pytest']},
        entry_points={'console_scripts': ['mathlang=mathlang.cli:main']},
    )


if __name__ == '__main__':
    main()
